#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Blocking terminal interactions: pause, typing effect, spinner, and numbered menu.
Every routine takes optional streams so it can be driven from in-memory buffers.
"""

import random
import re
import sys
import time
from typing import Callable, Optional, Sequence, TextIO, Union

from . import config as cfg
from .colors import Colors, ERROR_SYMBOL, WARNING_SYMBOL, print_color

# Plain ASCII decimal, optional sign. No underscores, no unicode digits.
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+)")

# Default for max_attempts: take the cap from config
FROM_CONFIG = object()


def _read_line(stream: TextIO, stderr: Optional[TextIO] = None) -> Optional[str]:
    """Reads one line. Returns None at end of input or when the stream cannot be read."""
    try:
        line: str = stream.readline()
    except (OSError, ValueError) as e:  # ValueError: I/O operation on closed file
        print_color(f"Could not read input: {e}", Colors.LIGHT_YELLOW, prefix=WARNING_SYMBOL, stream=stderr)
        return None
    if not line:
        return None
    return line


def pause_console(
    message: str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None
) -> None:
    """Prints message and waits until a full line has been entered. End of input resumes immediately."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    stdout.write(f"{message}\n")
    stdout.flush()
    _read_line(stdin)


def print_typing_text_effect(
    text: str,
    min_delay_ms: int,
    max_delay_ms: int,
    stdout: Optional[TextIO] = None,
    rng: Optional[random.Random] = None,
    sleep: Callable[[float], None] = time.sleep
) -> None:
    """
    Writes text one character at a time with a random delay after each one.

    Delays are whole milliseconds drawn uniformly from [min_delay_ms, max_delay_ms].
    The shared generator from config is used unless rng is given.
    Raises ValueError if min_delay_ms > max_delay_ms; the bounds are never swapped.
    """
    if min_delay_ms > max_delay_ms:
        raise ValueError(
            f"min_delay_ms ({min_delay_ms}) must not exceed max_delay_ms ({max_delay_ms})"
        )
    stdout = stdout if stdout is not None else sys.stdout
    rng = rng if rng is not None else cfg.get_random()

    for char in text:
        delay_ms: int = rng.randint(min_delay_ms, max_delay_ms)
        stdout.write(char)
        stdout.flush()
        sleep(max(0, delay_ms) / 1000.0)


def print_spinner(
    duration_ms: int,
    frame_delay_ms: int,
    stdout: Optional[TextIO] = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep
) -> None:
    """Spins | / - \\ in place until duration_ms has elapsed, then blanks it out and ends the line."""
    stdout = stdout if stdout is not None else sys.stdout
    frames = cfg.SPINNER_FRAMES
    duration: float = duration_ms / 1000.0

    start: float = clock()
    idx: int = 0
    while True:
        stdout.write(f"\r{frames[idx % len(frames)]}")
        stdout.flush()
        idx += 1
        sleep(max(0, frame_delay_ms) / 1000.0)
        if clock() - start >= duration:
            break

    stdout.write("\r \n")
    stdout.flush()


def prompt_numbered_menu(
    options: Sequence[str],
    separator: str,
    prompt_message: str,
    input_question_text: str,
    message_color: str = "",
    number_color: str = "",
    separator_color: str = "",
    option_color: str = "",
    input_question_color: str = "",
    error_color: str = Colors.LIGHT_RED,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    max_attempts: Union[int, None, object] = FROM_CONFIG
) -> int:
    """
    Prints a 1-based numbered list of options and asks the user to pick one.

    Returns the zero-based index of the chosen option, or -1 if there are no
    options, the input ends, or max_attempts invalid answers were given.
    Invalid answers (non-numeric, too large, out of range) print a message and
    ask again without re-printing the options. max_attempts defaults to the
    config value; pass None explicitly to ask forever regardless of config.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    if max_attempts is FROM_CONFIG:
        max_attempts = cfg.get_menu_max_attempts()
    if max_attempts is not None and max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
    messages = cfg.MENU_MESSAGES

    if not options:
        print_color(messages["no_options"], Colors.LIGHT_RED, prefix=ERROR_SYMBOL, stream=stderr)
        return -1

    stdout.write(f"{message_color}{prompt_message}\n")
    for i, option_text in enumerate(options):
        stdout.write(
            f"{number_color}{i + 1}"
            f"{separator_color}{separator}"
            f"{option_color}{option_text}"
            f"{Colors.RESET}\n"
        )

    attempts: int = 0
    while True:
        stdout.write(f"{input_question_color}\n{input_question_text}{number_color}")
        stdout.flush()

        line = _read_line(stdin, stderr)
        if line is None:
            stdout.write(error_color)
            print_color(messages["input_error"], Colors.LIGHT_RED, prefix=ERROR_SYMBOL, stream=stderr)
            stdout.write(Colors.RESET)
            stdout.flush()
            return -1

        problem: str
        match = _DECIMAL_RE.fullmatch(line.strip())
        if match is None:
            problem = messages["not_numeric"]
        elif len(match.group(1).lstrip("0")) > len(str(cfg.MENU_INT_LIMIT)):
            # More digits than the limit has, so past it without converting
            problem = messages["too_large"]
        else:
            choice: int = int(match.group(0))
            if abs(choice) > cfg.MENU_INT_LIMIT:
                problem = messages["too_large"]
            elif 1 <= choice <= len(options):
                stdout.write(Colors.RESET)
                stdout.flush()
                return choice - 1
            else:
                problem = messages["out_of_range"].format(count=len(options))

        stdout.write(f"{error_color}{problem}\n\n{Colors.RESET}")
        stdout.flush()

        attempts += 1
        if max_attempts is not None and attempts >= max_attempts:
            print_color(messages["too_many_attempts"], Colors.LIGHT_RED, prefix=ERROR_SYMBOL, stream=stderr)
            return -1
