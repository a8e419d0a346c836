"""Coloured terminal output helpers (Gruvbox-inspired 256-colour palette)."""

import sys

COLOR_RESET = "\033[0m"
COLOR_FG_DEFAULT = "\033[38;5;250m"
COLOR_BG_DEFAULT = "\033[48;5;235m"

COLOR_RED_FG = "\033[38;5;167m"
COLOR_GREEN_FG = "\033[38;5;142m"
COLOR_YELLOW_FG = "\033[38;5;214m"
COLOR_BLUE_FG = "\033[38;5;109m"
COLOR_MAGENTA_FG = "\033[38;5;175m"
COLOR_CYAN_FG = "\033[38;5;108m"
COLOR_ORANGE_FG = "\033[38;5;208m"

COLOR_BOLD = "\033[1m"

# Plain 16-colour (bright) fallbacks.
ANSI_RESET = "\033[0m"
ANSI_RED = "\033[91m"
ANSI_GREEN = "\033[92m"
ANSI_YELLOW = "\033[93m"
ANSI_BLUE = "\033[94m"
ANSI_MAGENTA = "\033[95m"
ANSI_CYAN = "\033[96m"
ANSI_WHITE = "\033[97m"
ANSI_BOLD = "\033[1m"


def colorize(text, color_code):
    """Wrap text in a colour, switching back to the default foreground after it."""
    return f"{color_code}{text}{COLOR_FG_DEFAULT}"


def print_error(message):
    """Print an error line in red to standard error."""
    print(f"{COLOR_RED_FG}Error: {message}{COLOR_RESET}", file=sys.stderr)


def print_success(message):
    """Print a success line in green to standard output."""
    print(f"{COLOR_GREEN_FG}Success: {message}{COLOR_RESET}", file=sys.stdout)


def print_info(message):
    """Print an informational line in yellow to standard output."""
    print(f"{COLOR_YELLOW_FG}Info: {message}{COLOR_RESET}", file=sys.stdout)


def print_message(message):
    """Print a plain line in the default foreground to standard output."""
    print(f"{COLOR_FG_DEFAULT}{message}{COLOR_RESET}", file=sys.stdout)


def print_header(message):
    """Print a bold blue header of the form '== message =='."""
    print(f"{COLOR_BOLD}{COLOR_BLUE_FG}== {message} =={COLOR_RESET}", file=sys.stdout)


def print_usage_message(message):
    """Print a usage line in the default foreground to standard error."""
    print(f"{COLOR_FG_DEFAULT}{message}{COLOR_RESET}", file=sys.stderr)