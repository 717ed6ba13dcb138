"""
Input helpers that re-prompt until the answer is valid.
"""

from typing import Callable

from core.config import MONTH_NAMES

InputFn = Callable[[str], str]


def prompt_int(input_fn: InputFn, prompt: str) -> int:
    while True:
        try:
            return int(input_fn(prompt).strip())
        except ValueError:
            continue


def prompt_int_range(input_fn: InputFn, prompt: str, low: int, high: int) -> int:
    """Prompt for an integer between low and high, inclusive."""
    while True:
        value = prompt_int(input_fn, prompt)
        if low <= value <= high:
            return value


def prompt_month(input_fn: InputFn, prompt: str) -> int:
    """Prompt for a month by name; returns 1-12."""
    while True:
        name = input_fn(prompt).strip().lower()
        if name in MONTH_NAMES:
            return MONTH_NAMES.index(name) + 1


def prompt_boolean(input_fn: InputFn, prompt: str) -> bool:
    """Prompt for a y/n answer."""
    while True:
        answer = input_fn(prompt).strip().lower()
        if answer.startswith("y"):
            return True
        if answer.startswith("n"):
            return False
