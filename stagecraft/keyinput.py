"""Keyboard and mouse button state tracking."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, Optional

from .errors import EngineError


class VirtualKey(IntEnum):
    LBUTTON = 0x01
    RBUTTON = 0x02
    CANCEL = 0x03
    MBUTTON = 0x04
    BACK = 0x08
    TAB = 0x09
    CLEAR = 0x0C
    RETURN = 0x0D
    SHIFT = 0x10
    CONTROL = 0x11
    MENU = 0x12
    PAUSE = 0x13
    CAPITAL = 0x14
    IME_ON = 0x16
    JUNJA = 0x17
    FINAL = 0x18
    IME_OFF = 0x1A
    ESCAPE = 0x1B
    CONVERT = 0x1C
    NONCONVERT = 0x1D
    ACCEPT = 0x1E
    MODECHANGE = 0x1F
    SPACE = 0x20
    PRIOR = 0x21
    NEXT = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    SELECT = 0x29
    PRINT = 0x2A
    EXECUTE = 0x2B
    SNAPSHOT = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    HELP = 0x2F
    LWIN = 0x5B
    RWIN = 0x5C
    APPS = 0x5D
    SLEEP = 0x5F
    NUMPAD0 = 0x60
    MULTIPLY = 0x6A
    ADD = 0x6B
    SEPARATOR = 0x6C
    SUBTRACT = 0x6D
    DECIMAL = 0x6E
    DIVIDE = 0x6F
    F1 = 0x70
    LSHIFT = 0xA0
    OEM_PLUS = 0xBB
    OEM_MINUS = 0xBD
    OEM_4 = 0xDB
    OEM_6 = 0xDD


@dataclass
class KeyState:
    """Down/press/up/free state machine for one polled key."""

    key: int = -1
    down: bool = False
    press: bool = False
    up: bool = False
    free: bool = True
    press_time: float = 0.0
    up_time: float = 0.0

    def _set(self, down: bool, press: bool, up: bool, free: bool) -> None:
        self.down, self.press, self.up, self.free = down, press, up, free

    def check(self, pressed: bool, delta_time: float) -> None:
        """Advance the state from whether the key is held this frame."""
        if pressed:
            self.press_time += delta_time
            if self.free:
                self._set(True, True, False, False)
            elif self.down:
                self.up_time = 0.0
                self._set(False, True, False, False)
        else:
            self.up_time += delta_time
            if self.press:
                self.press_time = 0.0
                self._set(False, False, True, False)
            elif self.up:
                self.press_time = 0.0
                self._set(False, False, False, True)


def _default_key_map() -> Dict[int, KeyState]:
    codes = [
        key for key in VirtualKey
        if key not in (VirtualKey.NUMPAD0, VirtualKey.F1, VirtualKey.OEM_PLUS, VirtualKey.OEM_MINUS)
    ]
    codes += [VirtualKey.NUMPAD0 + n for n in range(10)]
    codes += [VirtualKey.F1 + n for n in range(24)]
    keys = {int(code): KeyState(int(code)) for code in codes}
    # '-' and '+' are registered under their characters but poll the OEM keys.
    keys[ord("-")] = KeyState(int(VirtualKey.OEM_MINUS))
    keys[ord("+")] = KeyState(int(VirtualKey.OEM_PLUS))
    for code in range(ord("A"), ord("Z") + 1):
        keys[code] = KeyState(code)
    for code in range(ord("0"), ord("9") + 1):
        keys[code] = KeyState(code)
    return dict(sorted(keys.items()))


class EngineInput:
    """Tracks every registered key by polling a key reader once per tick."""

    def __init__(self, poll: Optional[Callable[[int], bool]] = None) -> None:
        self._poll = poll if poll is not None else (lambda key: False)
        self._keys = _default_key_map()
        self._any = KeyState()

    def key_check_tick(self, delta_time: float) -> None:
        any_pressed = False
        for state in self._keys.values():
            state.check(bool(self._poll(state.key)), delta_time)
            if state.press:
                any_pressed = True
        self._any.check(any_pressed, 0.0)

    def _state(self, key: int) -> KeyState:
        try:
            return self._keys[key]
        except KeyError:
            raise EngineError(f"key {key!r} has no input binding") from None

    def is_down(self, key: int) -> bool:
        return self._state(key).down

    def is_press(self, key: int) -> bool:
        return self._state(key).press

    def is_up(self, key: int) -> bool:
        return self._state(key).up

    def is_free(self, key: int) -> bool:
        return self._state(key).free

    def is_double_click(self, key: int, click_time: float) -> bool:
        state = self._state(key)
        return state.down and state.up_time < click_time

    def press_time(self, key: int) -> float:
        return self._state(key).press_time

    def is_anykey_down(self) -> bool:
        return self._any.down

    def is_anykey_press(self) -> bool:
        return self._any.press

    def is_anykey_up(self) -> bool:
        return self._any.up

    def is_anykey_free(self) -> bool:
        return self._any.free