#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Color table, status symbols, and the colored print helper used for diagnostics.
"""

import sys
from typing import Optional, List, TextIO

class Colors:
    """ANSI escape codes for terminal colors."""
    # Standard
    RED: str = '\033[31m'
    ORANGE: str = '\033[38;5;208m'
    YELLOW: str = '\033[33m'
    GREEN: str = '\033[32m'
    BLUE: str = '\033[34m'
    PURPLE: str = '\033[35m'
    CYAN: str = '\033[36m'
    # Normal
    WHITE: str = '\033[37m'
    GRAY: str = '\033[90m'
    BLACK: str = '\033[30m'
    # Light
    LIGHT_RED: str = '\033[91m'
    LIGHT_ORANGE: str = '\033[38;5;214m'
    LIGHT_YELLOW: str = '\033[93m'
    LIGHT_GREEN: str = '\033[92m'
    LIGHT_BLUE: str = '\033[94m'
    LIGHT_PURPLE: str = '\033[95m'
    LIGHT_CYAN: str = '\033[96m'
    # Styles
    BOLD: str = '\033[1m'
    ITALIC: str = '\033[3m'
    UNDERLINE: str = '\033[4m'
    RESET: str = '\033[0m'

ERROR_SYMBOL: str = f"{Colors.LIGHT_RED}✗{Colors.RESET}"
WARNING_SYMBOL: str = f"{Colors.LIGHT_YELLOW}!{Colors.RESET}"


def available_colors() -> List[str]:
    """Returns the names of every escape code in the color table."""
    return sorted(
        name for name, value in vars(Colors).items()
        if name.isupper() and isinstance(value, str)
    )


def get_color(name: str) -> str:
    """
    Looks up an escape code by name.
    Accepts 'light red', 'light-red' or 'LIGHT_RED'. Raises KeyError for unknown names.
    """
    key: str = name.strip().upper().replace(" ", "_").replace("-", "_")
    if key not in available_colors():
        raise KeyError(f"Unknown color: {name!r}")
    return getattr(Colors, key)


def print_color(
    text: str,
    color: str,
    prefix: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> None:
    """Prints text in a specified color. Defaults to stderr since this is used for diagnostics."""
    out: TextIO = stream if stream is not None else sys.stderr
    prefix_str: str = f"{prefix} " if prefix else ""
    out.write(f"{prefix_str}{color}{text}{Colors.RESET}\n")
    out.flush()
