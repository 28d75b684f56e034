from stagecraft.errors import EngineError, output_debug_text


def test_output_debug_text_appends_newline(capsys):
    output_debug_text("hello")
    captured = capsys.readouterr()
    assert captured.err == "hello\n"
    assert captured.out == ""


def test_output_debug_text_empty_line(capsys):
    output_debug_text("")
    assert capsys.readouterr().err == "\n"


def test_output_debug_text_keeps_order(capsys):
    output_debug_text("first")
    output_debug_text("second")
    assert capsys.readouterr().err.splitlines() == ["first", "second"]


def test_engine_error_carries_message():
    error = EngineError("level missing")
    assert str(error) == "level missing"
    assert error.args == ("level missing",)
    assert issubclass(EngineError, Exception)