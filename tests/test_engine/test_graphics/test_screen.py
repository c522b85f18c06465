import io

from tickengine.graphics.screen import TerminalScreen, CLEAR_SEQUENCE


def test_clear_writes_escape_sequence():
    stream = io.StringIO()
    screen = TerminalScreen(stream=stream)
    screen.clear()
    assert stream.getvalue() == CLEAR_SEQUENCE
    assert screen.frame_count == 1


def test_clear_disabled():
    stream = io.StringIO()
    screen = TerminalScreen(stream=stream, clear=False)
    screen.clear()
    screen.write_line("[Player] (5, 5)")
    assert stream.getvalue() == "[Player] (5, 5)\n"


def test_frame_holds_lines_since_last_clear():
    screen = TerminalScreen(stream=io.StringIO())
    screen.clear()
    screen.write_line("one")
    screen.write_line("two")
    assert screen.frame == ["one", "two"]

    screen.clear()
    assert screen.frame == []
    assert screen.frame_count == 2


def test_defaults_to_stdout(capsys):
    screen = TerminalScreen(clear=False)
    screen.write_line("hello")
    screen.flush()
    assert capsys.readouterr().out == "hello\n"
