from __future__ import annotations
from argparse import ArgumentTypeError


def positive_int(value: str) -> int:
    try:
        iv = int(value)
        if iv <= 0:
            raise ArgumentTypeError("value must be a positive integer")
        return iv
    except ValueError:
        raise ArgumentTypeError("value must be a positive integer")


def parse_menu_choice(value: str) -> int:
    # Raises ValueError on anything that is not a whole number
    return int(value.strip())


def strip_newline(value: str) -> str:
    return value.rstrip("\r\n")
