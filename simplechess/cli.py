"""Interactive command-line front end."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from simplechess.chessboard import MoveError, MoveResult
from simplechess.game import Game
from simplechess.presenters import render_game
from simplechess.types import Color, Position


class CommandLineUI:
    """Reads moves from a text stream and reports results to another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def _read_line(self) -> str | None:
        line = self._in.readline()
        return line if line else None

    def start_game_loop(self, game: Game) -> None:
        """Prompt for moves until the input is exhausted."""
        while True:
            self._out.write(render_game(game))
            self._say("Enter your move (e.g., e2 e4): ")
            line = self._read_line()
            if line is None:
                return

            fields = line.split()
            if len(fields) != 2:
                self._say("Invalid input. Please enter two positions.")
                continue

            try:
                start = Position.from_str(fields[0])
                end = Position.from_str(fields[1])
            except ValueError:
                self._say("Invalid position format. Please try again.")
                continue

            if start == end:
                self._say("Start and end positions cannot be the same.")
                continue

            try:
                result = game.play(start, end)
            except MoveError as error:
                self._say(f"Error: {error}")
                continue

            self._say("Move successful!")
            if result is MoveResult.CHECK_KING:
                self._say("Check! You need to protect your king.")
            elif result is MoveResult.CAN_UPGRADE_PIECE:
                self.handle_upgrade_piece(game, end)

    def handle_upgrade_piece(self, game: Game, upgrade_position: Position) -> None:
        """Ask for a dead piece index until a promotion succeeds or input ends."""
        self._say("You can upgrade your piece!")
        while True:
            self._say(
                "Enter the index of the dead piece you want to upgrade to (e.g., 0, 1, 2): "
            )
            line = self._read_line()
            if line is None:
                return
            text = line.strip()
            if not (text.isascii() and text.isdecimal()):
                self._say("Invalid input. Please enter a valid index.")
                continue
            try:
                game.upgrade_piece(int(text), upgrade_position)
            except MoveError as error:
                self._say(f"Error: {error}. Please try again.")
                continue
            self._say("Piece upgraded successfully!")
            return


def main(argv: list[str] | None = None) -> int:
    """Start an interactive game with white to move."""
    parser = argparse.ArgumentParser(prog="simplechess", description="Play chess in the terminal.")
    parser.parse_args(argv)
    game = Game(Color.WHITE)
    CommandLineUI().start_game_loop(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())