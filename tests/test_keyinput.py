import pytest

from stagecraft.errors import EngineError
from stagecraft.keyinput import EngineInput, KeyState, VirtualKey


@pytest.fixture
def held():
    return set()


@pytest.fixture
def engine_input(held):
    return EngineInput(lambda key: key in held)


def state_tuple(inp, key):
    return (inp.is_down(key), inp.is_press(key), inp.is_up(key), inp.is_free(key))


def test_initial_state_is_free(engine_input):
    assert state_tuple(engine_input, ord("A")) == (False, False, False, True)
    assert engine_input.is_anykey_free()


def test_full_cycle(engine_input, held):
    key = ord("A")
    held.add(key)
    engine_input.key_check_tick(0.1)
    assert state_tuple(engine_input, key) == (True, True, False, False)
    engine_input.key_check_tick(0.1)
    assert state_tuple(engine_input, key) == (False, True, False, False)
    held.clear()
    engine_input.key_check_tick(0.1)
    assert state_tuple(engine_input, key) == (False, False, True, False)
    assert engine_input.press_time(key) == 0.0
    engine_input.key_check_tick(0.1)
    assert state_tuple(engine_input, key) == (False, False, False, True)


def test_press_time_accumulates(engine_input, held):
    held.add(VirtualKey.SPACE)
    engine_input.key_check_tick(0.25)
    engine_input.key_check_tick(0.25)
    assert engine_input.press_time(VirtualKey.SPACE) == pytest.approx(0.5)


def test_anykey_follows_any_pressed_key(engine_input, held):
    held.add(ord("7"))
    engine_input.key_check_tick(0.1)
    assert engine_input.is_anykey_down()
    assert engine_input.is_anykey_press()
    engine_input.key_check_tick(0.1)
    assert not engine_input.is_anykey_down()
    held.clear()
    engine_input.key_check_tick(0.1)
    assert engine_input.is_anykey_up()
    engine_input.key_check_tick(0.1)
    assert engine_input.is_anykey_free()


def test_double_click(engine_input, held):
    key = ord("Z")
    held.add(key)
    engine_input.key_check_tick(0.1)
    engine_input.key_check_tick(0.1)
    held.clear()
    engine_input.key_check_tick(0.1)
    engine_input.key_check_tick(0.1)
    held.add(key)
    engine_input.key_check_tick(0.1)
    assert engine_input.is_down(key)
    assert engine_input.is_double_click(key, 0.5)
    assert not engine_input.is_double_click(key, 0.1)


def test_minus_key_polls_oem_minus(engine_input, held):
    held.add(VirtualKey.OEM_MINUS)
    engine_input.key_check_tick(0.1)
    assert engine_input.is_down(ord("-"))
    assert engine_input.is_free(ord("+"))


def test_unknown_key_raises(engine_input):
    with pytest.raises(EngineError):
        engine_input.is_down(VirtualKey.OEM_MINUS)
    with pytest.raises(EngineError):
        engine_input.press_time(0x07)


def test_function_and_numpad_keys_registered(engine_input, held):
    held.update({VirtualKey.F1 + 23, VirtualKey.NUMPAD0 + 9})
    engine_input.key_check_tick(0.1)
    assert engine_input.is_down(VirtualKey.F1 + 23)
    assert engine_input.is_down(VirtualKey.NUMPAD0 + 9)


def test_key_state_repress_while_up_stays_up():
    state = KeyState(1)
    state.check(True, 0.1)
    state.check(False, 0.1)
    state.check(True, 0.1)
    assert (state.down, state.press, state.up, state.free) == (False, False, True, False)