"""Tagged console output.

Every user-facing line carries a severity tag so runs can be grepped:

    [Info] Saved 4 item(s) to '/tmp/inventory.json'.
    [Warning] File 'missing.json' not found, starting with an empty log.
    [Error] Item with ID 99 not found.

Colors are only added when stdout is a terminal.
"""

import sys


class Colors:
    """Terminal colors for pretty output."""
    HEADER = '\033[95m'
    OKCYAN = '\033[96m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


def _use_color() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def _emit(tag: str, text: str, color: str = "") -> None:
    line = f"[{tag}] {text}"
    if color and _use_color():
        line = f"{color}{line}{Colors.ENDC}"
    print(line)


def print_info(text: str):
    """Print info message."""
    _emit("Info", text, Colors.OKCYAN)


def print_warning(text: str):
    """Print warning message."""
    _emit("Warning", text, Colors.WARNING)


def print_error(text: str):
    """Print error message."""
    _emit("Error", text, Colors.FAIL)


def print_step(text: str):
    """Print program-flow step."""
    _emit("Step", text, Colors.BOLD)


def print_fatal(text: str):
    """Print unrecoverable error reported at the top level."""
    _emit("Fatal", text, Colors.FAIL + Colors.BOLD)


def print_header(text: str):
    """Print section header."""
    if _use_color():
        text = f"{Colors.HEADER}{Colors.BOLD}{text}{Colors.ENDC}"
    print(f"\n{text}")
