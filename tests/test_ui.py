import re

from shouldupdate.ui import (
    COLOR_BLUE_FG,
    COLOR_BOLD,
    COLOR_CYAN_FG,
    COLOR_FG_DEFAULT,
    COLOR_GREEN_FG,
    COLOR_RED_FG,
    COLOR_RESET,
    COLOR_YELLOW_FG,
    colorize,
    print_error,
    print_header,
    print_info,
    print_message,
    print_success,
    print_usage_message,
)

_ANSI = re.compile("\033\\[(?:[0-9]{1,3}(?:;[0-9]{1,3})*)?[mGKHF]")


def _strip(text):
    return _ANSI.sub("", text)


def test_colorize_wraps_and_returns_to_default():
    assert colorize("myapp", COLOR_CYAN_FG) == COLOR_CYAN_FG + "myapp" + COLOR_FG_DEFAULT


def test_colorize_has_no_reset():
    assert COLOR_RESET not in colorize("x", COLOR_RED_FG)
    assert _strip(colorize("plain", COLOR_RED_FG)) == "plain"


def test_print_error_goes_to_stderr(capsys):
    print_error("boom")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == f"{COLOR_RED_FG}Error: boom{COLOR_RESET}\n"


def test_print_success_goes_to_stdout(capsys):
    print_success("done")
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == f"{COLOR_GREEN_FG}Success: done{COLOR_RESET}\n"


def test_print_info(capsys):
    print_info("note")
    captured = capsys.readouterr()
    assert captured.out == f"{COLOR_YELLOW_FG}Info: note{COLOR_RESET}\n"


def test_print_message_with_colorized_part(capsys):
    print_message(f"  - Application: {colorize('appX', COLOR_YELLOW_FG)}")
    captured = capsys.readouterr()
    assert captured.out.startswith(COLOR_FG_DEFAULT)
    assert captured.out.endswith(COLOR_RESET + "\n")
    assert _strip(captured.out) == "  - Application: appX\n"


def test_print_header(capsys):
    print_header("Managed Applications")
    captured = capsys.readouterr()
    assert captured.out == f"{COLOR_BOLD}{COLOR_BLUE_FG}== Managed Applications =={COLOR_RESET}\n"
    assert _strip(captured.out) == "== Managed Applications ==\n"


def test_print_usage_message_goes_to_stderr(capsys):
    print_usage_message("Usage: prog list")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert _strip(captured.err) == "Usage: prog list\n"