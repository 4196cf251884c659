#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Pure string builders: headers, progress bars, notifications, error and warning tags.
Colors are spliced in as opaque text, so any escape sequence (or an empty string) works.
"""

from typing import List, Tuple

from .colors import Colors


def _clamp_progress(current: int, maximum: int) -> Tuple[int, int]:
    """Clamps current into [0, maximum]. A non-positive maximum means no progress."""
    if maximum <= 0:
        return 0, 0
    current = max(0, min(current, maximum))
    return current, maximum


def _split_width(current: int, maximum: int, width: int) -> Tuple[int, int, int]:
    """Returns (filled, remaining, percentage) for a bar of the given width."""
    width = max(0, width)
    current, maximum = _clamp_progress(current, maximum)
    if maximum == 0:
        return 0, width, 0
    # Exact floors, 29 of 100 must read 29%
    filled: int = width * current // maximum
    percentage: int = current * 100 // maximum
    return filled, width - filled, percentage


def spacing(count: int) -> str:
    """Returns count newline characters. Zero or negative counts give an empty string."""
    return "\n" * max(0, count)


def header(
    line_char: str,
    line_count: int,
    text: str,
    space_char: str,
    line_color: str,
    text_color: str,
    space_color: str
) -> str:
    """Builds a header with the same repeated line segment on both sides of the text."""
    line_segment: str = line_char * max(0, line_count)
    return (
        f"{line_color}{line_segment}"
        f"{space_color}{space_char}"
        f"{text_color}{text}"
        f"{space_color}{space_char}"
        f"{line_color}{line_segment}"
        f"{Colors.RESET}"
    )


def advanced_header(
    left_char: str,
    left_count: int,
    right_char: str,
    right_count: int,
    text: str,
    space_char: str,
    left_color: str,
    right_color: str,
    text_color: str,
    space_color: str,
    reset_on_end: bool = True
) -> str:
    """
    Builds a header with independent left and right line segments.
    With reset_on_end=False the right color stays active for whatever is printed next.
    """
    parts: List[str] = [
        left_color, left_char * max(0, left_count),
        space_color, space_char,
        text_color, text,
        space_color, space_char,
        right_color, right_char * max(0, right_count),
    ]
    if reset_on_end:
        parts.append(Colors.RESET)
    return "".join(parts)


def progress_bar(
    current: int,
    maximum: int,
    width: int,
    bar_color: str,
    show_percentage: bool,
    percent_color: str
) -> str:
    """Builds a '#'/'-' progress bar, optionally followed by the percentage."""
    filled, remaining, percentage = _split_width(current, maximum, width)

    bar: str = f"{bar_color}{'#' * filled}{'-' * remaining}{Colors.RESET}"
    if show_percentage:
        bar += f" {percent_color}{percentage}%{Colors.RESET}"
    return bar


def advanced_progress_bar(
    current: int,
    maximum: int,
    width: int,
    prefix_text: str,
    suffix_text: str,
    fill_char: str,
    unfill_char: str,
    fill_color: str,
    unfill_color: str,
    text_color: str,
    prefix_color: str,
    suffix_color: str,
    bracket_color: str,
    show_percentage: bool = True,
    show_brackets: bool = True,
    reset_on_completion: bool = True
) -> str:
    """
    Builds a progress bar with custom fill characters, optional brackets,
    percentage, prefix and suffix text.

    Empty prefix or suffix text emits nothing at all, not even its color code.
    """
    filled, remaining, percentage = _split_width(current, maximum, width)

    parts: List[str] = []
    if prefix_text:
        parts += [prefix_color, prefix_text]
    if show_brackets:
        parts += [bracket_color, "["]

    parts += [fill_color, fill_char * filled]
    parts += [unfill_color, unfill_char * remaining]

    if show_brackets:
        parts += [bracket_color, "]"]
    if show_percentage:
        parts += [text_color, f" {percentage}%"]
    if suffix_text:
        parts += [" ", suffix_color, suffix_text]
    if reset_on_completion:
        parts.append(Colors.RESET)

    return "".join(parts)


def error(message: str) -> str:
    """Light red '[ERROR]: ' tag. No trailing reset, the caller resets."""
    return f"{Colors.LIGHT_RED}[ERROR]: {message}"


def warning(message: str) -> str:
    """Light yellow '[WARNING]: ' tag. No trailing reset, the caller resets."""
    return f"{Colors.LIGHT_YELLOW}[WARNING]: {message}"


def notification(
    left_border: str,
    inside: str,
    right_border: str,
    type_text: str,
    text: str,
    border_color: str,
    inside_color: str,
    text_color: str
) -> str:
    """Builds a notification such as '[!] INFO: text' with separately colored parts."""
    return (
        f"{border_color}{left_border}"
        f"{inside_color}{inside}"
        f"{border_color}{right_border}"
        f"{inside_color} {type_text}: "
        f"{text_color}{text}"
        f"{Colors.RESET}"
    )
