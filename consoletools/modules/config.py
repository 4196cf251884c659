#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Process-wide defaults for the console tools: spinner frames, menu messages,
the retry cap for numbered menus, and the shared random source.
"""

import random
from typing import Dict, List, Optional

# --- Spinner ---
SPINNER_FRAMES: List[str] = ["|", "/", "-", "\\"]

# --- Numbered menu ---
MENU_MESSAGES: Dict[str, str] = {
    "no_options": "No menu options provided.",
    "input_error": "Input error. Exiting.",
    "not_numeric": "Invalid input. Please enter a numeric value.",
    "too_large": "The number you entered is out of range. Please try again.",
    "out_of_range": "Invalid choice. Please enter a number between 1 and {count}.",
    "too_many_attempts": "Too many invalid attempts.",
}

# Largest magnitude accepted as a menu choice (32-bit signed int)
MENU_INT_LIMIT: int = 2**31 - 1

# None means retry forever
MENU_MAX_ATTEMPTS: Optional[int] = None

# --- Random source for the typing effect, seeded once at import ---
_RANDOM: random.Random = random.Random()


def get_menu_max_attempts() -> Optional[int]:
    """Gets the current retry cap for numbered menus (None is unbounded)."""
    return MENU_MAX_ATTEMPTS


def set_menu_max_attempts(value: Optional[int]) -> None:
    """Sets the retry cap for numbered menus. None restores unbounded retries."""
    global MENU_MAX_ATTEMPTS
    if value is not None and value < 1:
        raise ValueError(f"max attempts must be at least 1, got {value}")
    MENU_MAX_ATTEMPTS = value


def get_random() -> random.Random:
    """Gets the current shared random source."""
    return _RANDOM


def set_random(rng: random.Random) -> None:
    """Replaces the shared random source."""
    global _RANDOM
    _RANDOM = rng


def seed_random(seed: int) -> None:
    """Reseeds the shared random source so typing delays become reproducible."""
    _RANDOM.seed(seed)
