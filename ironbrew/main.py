"""Console front end: the core game loop and the command that starts it."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Callable, List, Optional, TextIO

from .game import (
    MOVE_DOWN,
    MOVE_FIRE,
    MOVE_LEFT,
    MOVE_QUIT,
    MOVE_RIGHT,
    MOVE_UP,
    Game,
    calculate_score,
)

_MOVES = frozenset({MOVE_UP, MOVE_LEFT, MOVE_DOWN, MOVE_RIGHT})
PROMPT = "Move (WASD), Fire (R), Quit (Q): "


def clear_screen() -> None:
    """Clear the terminal with the platform's own clear command."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()


def read_key() -> str:
    """Read one key press without waiting for Enter; '' at end of input."""
    stdin = sys.stdin
    if not stdin.isatty():
        return stdin.read(1)
    if os.name == "nt":
        import msvcrt

        return msvcrt.getwch()

    import termios
    import tty

    fd = stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def handle_command(game: Game, command: str) -> bool:
    """Apply one key press to the game; return False when the player quits."""
    command = command.lower()
    if command in _MOVES:
        game.player.last_dir = command
        game.move_player(command)
    elif command == MOVE_FIRE:
        game.fire_bullet()
    elif command == MOVE_QUIT:
        return False
    return True


def game_loop(
    game: Game,
    read: Callable[[], str] = read_key,
    out: Optional[TextIO] = None,
    clear: Callable[[], None] = clear_screen,
) -> int:
    """Run until the hero dies, escapes or quits; return the final score.

    An empty read (end of input) ends the game as a quit would.
    """
    stream = sys.stdout if out is None else out
    running = True
    while running:
        clear()
        stream.write(game.render_map())
        stream.write(game.stats_line() + "\n")
        stream.write(PROMPT)
        stream.flush()

        command = read()
        running = bool(command) and handle_command(game, command)

        if game.player.hp <= 0:
            stream.write(
                f"\n\nYou died! Final Score: {calculate_score(game.player)}\n"
            )
            break
        if game.player.exited:
            stream.write(
                "\n\nYou escaped the Ironbrew Inn! Final Score: "
                f"{calculate_score(game.player)}\n"
            )
            break
    stream.flush()
    return calculate_score(game.player)


def main(argv: Optional[List[str]] = None) -> int:
    """Start a new game on the terminal."""
    game = Game(sound_stream=sys.stdout)
    game_loop(game, read_key, sys.stdout, clear_screen)
    sys.stdout.write("\nPress Enter to exit...")
    sys.stdout.flush()
    try:
        input()
    except EOFError:
        pass
    return 0