from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


@dataclass(slots=True)
class Song:
    title: str


class PlaylistEntry(NamedTuple):
    title: str
    is_current: bool


class RemoveOutcome(Enum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    EMPTY = "empty"
