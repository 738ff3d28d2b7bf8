__version__ = "0.1.0"

from .config import Config
from .errors import AllocationError, InvalidTitleError, PlaylistError
from .models import PlaylistEntry, RemoveOutcome, Song
from .playlist import Playlist, PlaylistView
from .commands import Command, CommandDispatcher, CommandResult
from .cli import run_session


__all__ = [
    "Config",
    "AllocationError",
    "InvalidTitleError",
    "PlaylistError",
    "PlaylistEntry",
    "RemoveOutcome",
    "Song",
    "Playlist",
    "PlaylistView",
    "Command",
    "CommandDispatcher",
    "CommandResult",
    "run_session",
]
