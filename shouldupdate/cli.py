"""Command-line interface: add, remove, list and check monitored applications."""

import os
import sys

from shouldupdate.checker import VersionLookupError, get_latest_version
from shouldupdate.config import ConfigError, load_config, save_config
from shouldupdate.ui import (
    COLOR_BLUE_FG,
    COLOR_CYAN_FG,
    COLOR_FG_DEFAULT,
    COLOR_GREEN_FG,
    COLOR_MAGENTA_FG,
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

_HELP_FLAGS = {"-h", "-help", "--h", "--help"}


class _UsageExit(Exception):
    """Signals that argument parsing ended the command with an exit code."""

    def __init__(self, code):
        super().__init__(code)
        self.code = code


def _default_prog():
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "shouldupdate"


def _usage_lines(command, prog):
    example = colorize(prog, COLOR_CYAN_FG)
    if command == "add":
        return [
            f"Usage: {prog} add <application_name> <version>",
            f"Example: {example} add myapp 1.0.2",
        ]
    if command == "remove":
        return [
            f"Usage: {prog} remove <application_name>",
            f"Example: {example} remove myapp",
        ]
    if command == "list":
        return [f"Usage: {prog} list"]
    return [
        f"Usage: {prog} check [<application_name>]",
        f"Example: {example} check myapp",
        f"Example: {example} check",
    ]


def _print_command_usage(command, prog):
    for line in _usage_lines(command, prog):
        print_usage_message(line)


def _parse_positionals(command, args, prog):
    """Split off leading flags; none are defined, so only help is accepted."""
    rest = list(args)
    while rest:
        arg = rest[0]
        if arg == "--":
            return rest[1:]
        if not arg.startswith("-") or arg == "-":
            break
        if arg in _HELP_FLAGS:
            _print_command_usage(command, prog)
            raise _UsageExit(0)
        name = arg.lstrip("-").split("=", 1)[0]
        print(f"flag provided but not defined: -{name}", file=sys.stderr)
        _print_command_usage(command, prog)
        raise _UsageExit(2)
    return rest


def print_overall_usage(prog=None):
    """Print the list of commands to standard error and standard output."""
    prog = prog or _default_prog()
    default = COLOR_FG_DEFAULT
    print_usage_message(f"Usage: {prog} <command> [arguments]")
    print_usage_message("Commands:")
    print_message(
        f"  {colorize('add', COLOR_GREEN_FG)} {colorize('<name> <version>', default)}"
        "\tAdd a new application to monitor"
    )
    print_message(
        f"  {colorize('remove', COLOR_RED_FG)} {colorize('<name>', default)}"
        "\tRemove an application from monitoring"
    )
    print_message(f"  {colorize('list', COLOR_BLUE_FG)}\t\t\tList all monitored applications")
    print_message(
        f"  {colorize('check', COLOR_YELLOW_FG)} {colorize('[<name>]', default)}"
        "\tCheck for updates, optionally for a specific app"
    )
    print_usage_message(
        f'\nUse "{prog} <command> --help" for more information about a command '
        "(not yet implemented)."
    )


def _load(config_path):
    try:
        return load_config(config_path)
    except ConfigError as exc:
        print_error(f"Could not load configuration: {exc}")
        return None


def handle_add(app_name, app_version, config_path=None):
    """Add an application or update its recorded version."""
    config = _load(config_path)
    if config is None:
        return

    old_version = config.get(app_name)
    config[app_name] = app_version

    try:
        save_config(config, config_path)
    except ConfigError as exc:
        print_error(f"Could not save configuration for '{app_name}': {exc}")
        return

    if old_version is not None:
        print_success(
            f"Application '{colorize(app_name, COLOR_YELLOW_FG)}' updated from version "
            f"'{colorize(old_version, COLOR_MAGENTA_FG)}' to "
            f"'{colorize(app_version, COLOR_CYAN_FG)}'."
        )
    else:
        print_success(
            f"Application '{colorize(app_name, COLOR_YELLOW_FG)}' added with version "
            f"'{colorize(app_version, COLOR_CYAN_FG)}'."
        )


def handle_remove(app_name, config_path=None):
    """Stop monitoring an application."""
    config = _load(config_path)
    if config is None:
        return

    if app_name not in config:
        print_info(
            f"Application '{colorize(app_name, COLOR_MAGENTA_FG)}' not found in "
            "configuration. Nothing to remove."
        )
        return

    del config[app_name]

    try:
        save_config(config, config_path)
    except ConfigError as exc:
        print_error(f"Could not save configuration after removing '{app_name}': {exc}")
        return
    print_success(f"Application '{colorize(app_name, COLOR_YELLOW_FG)}' removed.")


def handle_list(config_path=None):
    """Print every monitored application and its version, sorted by name."""
    config = _load(config_path)
    if config is None:
        return

    if not config:
        print_info("No applications currently managed. Use the 'add' command to add some.")
        return

    print_header("Managed Applications")
    for app_name in sorted(config):
        print_message(
            f"  - Application: {colorize(app_name, COLOR_YELLOW_FG)}, "
            f"Version: {colorize(config[app_name], COLOR_CYAN_FG)}"
        )


def check_app_version(app_name, current_version, fetch=None):
    """Compare the recorded version of one application with its latest release."""
    fetch = fetch or get_latest_version
    if "/" not in app_name:
        print_info(
            f"Skipping {colorize(app_name, COLOR_MAGENTA_FG)}: Not in 'owner/repo' format. "
            "Cannot check for updates via GitHub."
        )
        return

    print(
        f"{COLOR_FG_DEFAULT}Checking {colorize(app_name, COLOR_YELLOW_FG)}... {COLOR_RESET}",
        end="",
        flush=True,
    )
    try:
        latest_version = fetch(app_name)
    except VersionLookupError as exc:
        print()
        print_error(f"Failed to check {colorize(app_name, COLOR_MAGENTA_FG)}: {exc}")
        return

    if latest_version == current_version:
        latest_color, status = COLOR_GREEN_FG, "Up to date"
    elif latest_version > current_version:
        latest_color, status = COLOR_RED_FG, "Update Available!"
    else:
        latest_color, status = COLOR_YELLOW_FG, "Version discrepancy"

    print(
        f"{COLOR_FG_DEFAULT} Current: {colorize(current_version, COLOR_CYAN_FG)}, "
        f"Latest: {colorize(latest_version, latest_color)} "
        f"({colorize(status, latest_color)}){COLOR_RESET}"
    )


def handle_check(specific_app=None, config_path=None, fetch=None):
    """Check one application, or all of them, for newer releases."""
    config = _load(config_path)
    if config is None:
        return

    if not config:
        print_info("No applications currently managed. Use 'add' command to add some.")
        return

    if specific_app:
        current_version = config.get(specific_app)
        if current_version is None:
            print_error(
                f"Application '{colorize(specific_app, COLOR_YELLOW_FG)}' not found in "
                "your managed list."
            )
            return
        check_app_version(specific_app, current_version, fetch)
        return

    print_message(f"{COLOR_BLUE_FG}Checking all managed applications for updates...{COLOR_RESET}")
    for app_name, current_version in config.items():
        check_app_version(app_name, current_version, fetch)


def main(argv=None):
    """Run the command line; return the process exit code."""
    prog = _default_prog()
    args = list(sys.argv[1:] if argv is None else argv)

    if not args:
        print_overall_usage(prog)
        return 1

    command, rest = args[0], args[1:]
    if command not in ("add", "remove", "list", "check"):
        print_error(f"Unknown command '{command}'.")
        print_overall_usage(prog)
        return 1

    try:
        positionals = _parse_positionals(command, rest, prog)
    except _UsageExit as exc:
        return exc.code

    if command == "add":
        if len(positionals) < 2:
            print_error("Missing application name and/or version for 'add' command.")
            _print_command_usage(command, prog)
            return 1
        handle_add(positionals[0], positionals[1])
    elif command == "remove":
        if not positionals:
            print_error("Missing application name for 'remove' command.")
            _print_command_usage(command, prog)
            return 1
        handle_remove(positionals[0])
    elif command == "list":
        if positionals:
            print_error("'list' command does not take any arguments.")
            _print_command_usage(command, prog)
            return 1
        handle_list()
    else:
        if len(positionals) > 1:
            print_error("'check' command accepts at most one application name.")
            _print_command_usage(command, prog)
            return 1
        handle_check(positionals[0] if positionals else None)
    return 0


if __name__ == "__main__":
    sys.exit(main())