"""The engine core: owns levels and drives one frame at a time."""

import math
import time
from typing import Callable, Dict, List, Optional, Type, TypeVar

from .errors import EngineError
from .keyinput import EngineInput
from .level import Level
from .strings import to_upper
from .timer import EngineTime

LevelT = TypeVar("LevelT", bound=Level)


class EngineCore:
    """Keeps named levels, switches between them and runs frames."""

    _is_debug_value = False

    def __init__(
        self,
        engine_input: Optional[EngineInput] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.engine_input = engine_input if engine_input is not None else EngineInput()
        self.main_timer = EngineTime(clock)
        self.frame = -1
        self.frame_time = 0.0
        self.cur_frame_time = 0.0
        self.levels: Dict[str, Level] = {}
        self._cur_level: Optional[Level] = None
        self._next_level: Optional[Level] = None
        self._destroy_level_names: List[str] = []
        self.started = False
        self.ended = False
        self.play_time = 0.0

    @property
    def current_level(self) -> Optional[Level]:
        return self._cur_level

    @staticmethod
    def is_debug() -> bool:
        return EngineCore._is_debug_value

    @staticmethod
    def engine_debug_switch() -> None:
        EngineCore._is_debug_value = not EngineCore._is_debug_value

    def begin_play(self) -> None:
        """Called once when the engine starts; marks the engine as started."""
        self.started = True

    def tick(self, delta_time: float) -> None:
        """Called once per frame before the current level ticks; accumulates play time."""
        self.play_time += delta_time

    def end(self) -> None:
        """Called when the engine shuts down; marks the engine as ended."""
        self.ended = True

    def create_level(self, level_type: Type[LevelT], name: str) -> LevelT:
        """Create and start a level under a case-insensitive name."""
        upper = to_upper(name)
        if upper in self.levels:
            raise EngineError(f"a level named {name!r} already exists")
        level = level_type()
        level.name = name
        level.begin_play()
        self.levels[upper] = level
        return level

    def change_level(self, name: str) -> None:
        """Switch to the named level at the start of the next frame."""
        upper = to_upper(name)
        if upper not in self.levels:
            raise EngineError(f"cannot change to level {name!r}: it does not exist")
        self._next_level = self.levels[upper]

    def destroy_level(self, name: str) -> None:
        """Destroy the named level at the start of the next frame."""
        upper = to_upper(name)
        if upper not in self.levels:
            raise EngineError(f"cannot destroy level {name!r}: it does not exist")
        self._destroy_level_names.append(upper)

    def set_frame(self, frame: int) -> None:
        """Limit the frame rate; values below one leave it unlimited."""
        self.frame = frame
        self.frame_time = 1.0 / frame if frame != 0 else math.inf

    def core_tick(self, delta_time: Optional[float] = None) -> bool:
        """Run one frame; returns False when the frame limiter skipped it."""
        if delta_time is None:
            delta_time = self.main_timer.time_check()

        if self.frame >= 1:
            self.cur_frame_time += delta_time
            if self.cur_frame_time <= self.frame_time:
                return False
            self.cur_frame_time -= self.frame_time
            delta_time = self.frame_time

        delta_time = min(delta_time, 1.0 / 60.0)

        self.engine_input.key_check_tick(delta_time)

        for upper in self._destroy_level_names:
            level = self.levels.pop(upper, None)
            if level is None:
                continue
            if level is self._cur_level:
                self._cur_level = None
            if level is self._next_level:
                self._next_level = None
            level.end()
        self._destroy_level_names.clear()

        if self._next_level is not None:
            if self._cur_level is not None:
                self._cur_level.level_end(self._next_level)
            self._next_level.level_start(self._cur_level)
            self._cur_level = self._next_level
            self._next_level = None
            self.main_timer.time_check_start()
            delta_time = self.main_timer.time_check()
            self.cur_frame_time = 0.0

        if self._cur_level is None:
            raise EngineError("no level has been set to run")

        level = self._cur_level
        self.tick(delta_time)
        level.tick(delta_time)
        level.level_tick(delta_time)
        level.level_release(delta_time)
        return True

    def engine_end(self) -> None:
        """Drop every level."""
        self.levels.clear()
        self._cur_level = None
        self._next_level = None
        self._destroy_level_names.clear()