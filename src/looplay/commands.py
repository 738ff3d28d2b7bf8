"""Menu commands and their dispatch onto a playlist.

Nothing here reads or writes the console: a command runs against the
playlist and returns the lines the caller should show.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable
from .errors import AllocationError, InvalidTitleError
from .models import RemoveOutcome
from .playlist import Playlist
from .utils.logging import setup_logging

logger = setup_logging(__name__)


class Command(IntEnum):
    ADD = 1
    REMOVE = 2
    DISPLAY = 3
    PLAY_CURRENT = 4
    PLAY_NEXT = 5
    PLAY_PREVIOUS = 6
    EXIT = 7


MENU_LABELS: dict[Command, str] = {
    Command.ADD: "Add Song",
    Command.REMOVE: "Remove Song",
    Command.DISPLAY: "Display Playlist",
    Command.PLAY_CURRENT: "Play Current",
    Command.PLAY_NEXT: "Play Next",
    Command.PLAY_PREVIOUS: "Play Previous",
    Command.EXIT: "Exit",
}

TITLE_PROMPTS: dict[Command, str] = {
    Command.ADD: "Enter song title: ",
    Command.REMOVE: "Enter song title to remove: ",
}

NOTHING_TO_PLAY = "No songs to play!"
EMPTY_PLAYLIST = "Playlist is empty!"


def render_menu() -> list[str]:
    lines = ["", "===== MUSIC PLAYLIST (Circular Linked List) ====="]
    lines += [f"{command.value}. {MENU_LABELS[command]}" for command in Command]
    return lines


@dataclass(slots=True)
class CommandResult:
    lines: list[str] = field(default_factory=list)
    exit: bool = False


class CommandDispatcher:
    def __init__(self, playlist: Playlist) -> None:
        self.playlist = playlist
        self._handlers: dict[Command, Callable[[str | None], CommandResult]] = {
            Command.ADD: self._add,
            Command.REMOVE: self._remove,
            Command.DISPLAY: self._display,
            Command.PLAY_CURRENT: lambda _: self._play(self.playlist.play_current),
            Command.PLAY_NEXT: lambda _: self._play(self.playlist.play_next),
            Command.PLAY_PREVIOUS: lambda _: self._play(self.playlist.play_previous),
            Command.EXIT: self._exit,
        }

    @staticmethod
    def needs_title(command: Command) -> bool:
        return command in TITLE_PROMPTS

    def dispatch(self, command: Command, title: str | None = None) -> CommandResult:
        logger.info(f"Running command {command.name}.")
        return self._handlers[command](title)

    def _add(self, title: str | None) -> CommandResult:
        if not title or not title.strip():
            return CommandResult(["Empty title; not added."])
        try:
            self.playlist.add(title)
        except InvalidTitleError:
            # Blank once cut to the title bound
            return CommandResult(["Empty title; not added."])
        except AllocationError:
            return CommandResult(["Error: memory allocation failed."])
        return CommandResult([f'Added: "{self.playlist.normalize_title(title)}"'])

    def _remove(self, title: str | None) -> CommandResult:
        if not title or not self.playlist.normalize_title(title).strip():
            return CommandResult(["Empty title."])
        outcome = self.playlist.remove(title)
        title = self.playlist.normalize_title(title)
        if outcome is RemoveOutcome.EMPTY:
            return CommandResult([EMPTY_PLAYLIST])
        if outcome is RemoveOutcome.NOT_FOUND:
            return CommandResult([f'Song not found: "{title}"'])
        return CommandResult([f'Removed: "{title}"'])

    def _display(self, _: str | None) -> CommandResult:
        view = self.playlist.display()
        if not len(view):
            return CommandResult([EMPTY_PLAYLIST])
        lines = ["", "--- PLAYLIST ---"]
        for entry in view:
            if entry.is_current:
                lines.append(f"-> {entry.title}  [CURRENT]")
            else:
                lines.append(f"   {entry.title}")
        lines.append("----------------")
        return CommandResult(lines)

    def _play(self, move: Callable[[], str | None]) -> CommandResult:
        title = move()
        if title is None:
            return CommandResult([NOTHING_TO_PLAY])
        return CommandResult([f"Now playing: {title}"])

    def _exit(self, _: str | None) -> CommandResult:
        self.playlist.teardown()
        return CommandResult(["Exiting. Goodbye!"], exit=True)
