from __future__ import annotations
from pathlib import Path
from json import load, dump
from os import getenv
from .playlist import MAX_TITLE_LENGTH
from .utils.logging import setup_logging

logger = setup_logging(__name__)


def _env_int(name: str, default: int) -> int:
    value = getenv(name)
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}: not an integer.")
        return default
    if parsed <= 0:
        logger.warning(f"Ignoring {name}={value!r}: must be positive.")
        return default
    return parsed


class Config:
    def __init__(self, config_dir: Path | None = None) -> None:
        self.config_dir = config_dir or Path.home() / ".config" / "looplay"
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file = self.config_dir / "config.json"
        self.default_config = {
            "max_title_length": _env_int("LOOPLAY_MAX_TITLE_LENGTH", MAX_TITLE_LENGTH),
            "show_menu": True,  # print the numbered menu before every prompt
        }
        self.data = self.load()

    def load(self) -> dict:
        if self.config_file.exists():
            with open(self.config_file, "r", encoding="utf-8") as f:
                stored = load(f)
            # Keys missing from an older file fall back to defaults
            return {**self.default_config, **stored}
        else:
            self.save(self.default_config)
            return dict(self.default_config)

    def save(self, data: dict) -> None:
        with open(self.config_file, "w", encoding="utf-8") as f:
            dump(data, f, indent=4)
