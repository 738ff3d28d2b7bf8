"""Circular playlist backed by an index arena.

Songs live in ``_slots``; each slot stores the song and the index of its
successor. ``_head``, ``_tail`` and ``_cursor`` are indices into the arena,
so the circle never holds object references to itself. Freed slots are
recycled through ``_free``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator
from .errors import AllocationError, InvalidTitleError
from .models import PlaylistEntry, RemoveOutcome, Song
from .utils.logging import setup_logging

logger = setup_logging(__name__)

# Longest stored title; longer input is cut to this length.
MAX_TITLE_LENGTH = 99


@dataclass(slots=True)
class _Node:
    song: Song
    next: int


class PlaylistView:
    """Restartable view over the songs, from head, once around the circle."""

    def __init__(self, playlist: Playlist) -> None:
        self._playlist = playlist

    def __iter__(self) -> Iterator[PlaylistEntry]:
        return self._playlist._entries()

    def __len__(self) -> int:
        return len(self._playlist)


class Playlist:
    def __init__(self, max_title_length: int = MAX_TITLE_LENGTH) -> None:
        if max_title_length <= 0:
            raise ValueError("max_title_length must be a positive integer")
        self.max_title_length = max_title_length
        self._slots: list[_Node | None] = []
        self._free: list[int] = []
        self._head: int | None = None
        self._tail: int | None = None
        self._cursor: int | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def head(self) -> str | None:
        return self._title_at(self._head)

    @property
    def tail(self) -> str | None:
        return self._title_at(self._tail)

    @property
    def current(self) -> str | None:
        return self._title_at(self._cursor)

    def normalize_title(self, title: str) -> str:
        # Longer titles are cut, never rejected
        return title[: self.max_title_length]

    def add(self, title: str) -> None:
        title = self.normalize_title(title)
        if not title.strip():
            raise InvalidTitleError("Song title must not be empty")

        index = self._allocate(title)
        node = self._node(index)
        if self._head is None:
            node.next = index
            self._head = self._tail = self._cursor = index
        else:
            node.next = self._head
            self._node(self._tail).next = index
            self._tail = index
        self._size += 1
        logger.info(f'Added: "{title}"')

    def remove(self, title: str) -> RemoveOutcome:
        if self._head is None:
            logger.info(f'Cannot remove "{title}": playlist is empty.')
            return RemoveOutcome.EMPTY

        target = self.normalize_title(title)
        prev = self._tail
        index = self._head
        for _ in range(self._size):
            node = self._node(index)
            if node.song.title == target:
                self._unlink(prev, index)
                logger.info(f'Removed: "{target}"')
                return RemoveOutcome.REMOVED
            prev, index = index, node.next

        logger.info(f'Song not found: "{target}"')
        return RemoveOutcome.NOT_FOUND

    def display(self) -> PlaylistView:
        return PlaylistView(self)

    def titles(self) -> list[str]:
        return [entry.title for entry in self.display()]

    def cycle(self, steps: int) -> Iterator[str]:
        """Follow next links from head for ``steps`` songs, wrapping around."""
        if steps < 0:
            raise ValueError("steps must not be negative")
        index = self._head
        if index is None:
            return
        for _ in range(steps):
            node = self._node(index)
            yield node.song.title
            index = node.next

    def play_current(self) -> str | None:
        return self.current

    def play_next(self) -> str | None:
        if self._cursor is None:
            return None
        self._cursor = self._node(self._cursor).next
        return self.current

    def play_previous(self) -> str | None:
        if self._cursor is None:
            return None
        if self._size == 1:
            return self.current

        # Links only go forward, so walk from head to the node before the cursor
        index = self._head
        while self._node(index).next != self._cursor:
            index = self._node(index).next
        self._cursor = index
        return self.current

    def teardown(self) -> None:
        if self._head is None:
            return
        released = self._size
        index = self._head
        for _ in range(self._size):
            node = self._node(index)
            self._slots[index] = None
            index = node.next
        self._slots.clear()
        self._free.clear()
        self._head = self._tail = self._cursor = None
        self._size = 0
        logger.info(f"Playlist cleared, {released} songs released.")

    def _entries(self) -> Iterator[PlaylistEntry]:
        index = self._head
        for _ in range(self._size):
            node = self._node(index)
            yield PlaylistEntry(node.song.title, index == self._cursor)
            index = node.next

    def _allocate(self, title: str) -> int:
        try:
            node = _Node(song=Song(title), next=-1)
            if self._free:
                index = self._free[-1]
                self._slots[index] = node
                self._free.pop()
            else:
                self._slots.append(node)
                index = len(self._slots) - 1
        except MemoryError as e:
            logger.error(f'Memory allocation failed while adding "{title}".')
            raise AllocationError("memory allocation failed") from e
        return index

    def _unlink(self, prev: int, index: int) -> None:
        node = self._node(index)
        if self._size == 1:
            self._head = self._tail = self._cursor = None
        else:
            self._node(prev).next = node.next
            if index == self._head:
                self._head = node.next
            if index == self._tail:
                self._tail = prev
            if index == self._cursor:
                self._cursor = node.next
        self._slots[index] = None
        self._free.append(index)
        self._size -= 1

    def _node(self, index: int) -> _Node:
        node = self._slots[index]
        if node is None:
            raise RuntimeError(f"Playlist slot {index} is not in use")
        return node

    def _title_at(self, index: int | None) -> str | None:
        if index is None:
            return None
        return self._node(index).song.title
