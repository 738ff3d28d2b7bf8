from __future__ import annotations
from argparse import (
    ArgumentParser,
    ArgumentDefaultsHelpFormatter,
    Namespace,
    RawTextHelpFormatter,
)
from typing import NoReturn
from . import __version__
from .cli import run_session
from .config import Config
from .playlist import Playlist
from .utils.cli import positive_int
from .utils.logging import setup_logging

logger = setup_logging(__name__)


class HelpFormatter(ArgumentDefaultsHelpFormatter, RawTextHelpFormatter):
    pass


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="looplay",
        description=(
            "Looplay - Interactive circular music playlist\n\n"
            "Examples:\n"
            "  looplay\n"
            "  looplay --max-title-length 40\n"
            "  looplay --no-menu --max-title-length 60 --save\n"
        ),
        formatter_class=HelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"Looplay {__version__}",
        help="Show version and exit.",
    )
    parser.add_argument(
        "--max-title-length",
        type=positive_int,
        help="Longest stored song title; longer titles are truncated. Defaults to the configured value.",
    )
    parser.add_argument(
        "--no-menu",
        action="store_true",
        help="Do not print the numbered menu before each prompt.",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Store the effective settings in the config file before starting.",
    )
    return parser


def get_session_settings(args: Namespace, config: Config) -> tuple[int, bool]:
    if args.max_title_length:
        max_title_length = args.max_title_length
    else:
        try:
            max_title_length = int(config.data["max_title_length"])
        except (TypeError, ValueError):
            exit_with_error(
                f"Invalid max_title_length in config: {config.data['max_title_length']!r}"
            )
        if max_title_length <= 0:
            exit_with_error(f"Invalid max_title_length in config: {max_title_length}")
    show_menu = False if args.no_menu else bool(config.data.get("show_menu", True))
    return max_title_length, show_menu


def exit_with_error(message: str) -> NoReturn:
    logger.error(message)
    print(message)
    raise SystemExit(1)


def handle_save(config: Config, max_title_length: int, show_menu: bool) -> None:
    config.data["max_title_length"] = max_title_length
    config.data["show_menu"] = show_menu
    config.save(config.data)
    logger.info(f"Settings saved to {config.config_file}.")
    print("Settings saved to config.")


def main(argv: list[str] | None = None) -> None:
    parser = get_parser()
    args = parser.parse_args(argv)

    config = Config()
    max_title_length, show_menu = get_session_settings(args, config)

    if args.save:
        handle_save(config, max_title_length, show_menu)

    playlist = Playlist(max_title_length=max_title_length)
    run_session(playlist, show_menu=show_menu)


if __name__ == "__main__":
    main()
