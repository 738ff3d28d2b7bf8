from __future__ import annotations
from typing import Callable
from .commands import Command, CommandDispatcher, TITLE_PROMPTS, render_menu
from .playlist import Playlist
from .utils.cli import parse_menu_choice, strip_newline
from .utils.logging import setup_logging

logger = setup_logging(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def read_command(input_fn: InputFn, output_fn: OutputFn) -> Command | None:
    raw = input_fn("Enter your choice: ")
    try:
        number = parse_menu_choice(raw)
    except ValueError:
        logger.warning(f"Non-numeric menu input: {raw!r}")
        output_fn("Invalid input. Try again.")
        return None
    try:
        return Command(number)
    except ValueError:
        logger.warning(f"Menu choice out of range: {number}")
        output_fn(f"Invalid choice. Enter a number between 1 and {len(Command)}.")
        return None


def run_session(
    playlist: Playlist,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    show_menu: bool = True,
) -> None:
    dispatcher = CommandDispatcher(playlist)
    logger.info("Session started.")
    try:
        while True:
            if show_menu:
                for line in render_menu():
                    output_fn(line)

            try:
                command = read_command(input_fn, output_fn)
            except EOFError:
                logger.info("End of input reached, leaving session.")
                break
            if command is None:
                continue

            title = None
            if dispatcher.needs_title(command):
                try:
                    title = strip_newline(input_fn(TITLE_PROMPTS[command]))
                except EOFError:
                    output_fn("Input error.")
                    logger.info("End of input while reading a title, leaving session.")
                    break

            try:
                result = dispatcher.dispatch(command, title)
            except Exception as e:
                logger.error(f"Command {command.name} failed: {e}", exc_info=True)
                output_fn(f"Command failed: {e}")
                continue

            for line in result.lines:
                output_fn(line)
            if result.exit:
                break
    except KeyboardInterrupt:
        output_fn("\nCancelled by user.")
        logger.info("Session cancelled by user.")
    finally:
        playlist.teardown()
        logger.info("Session ended.")
