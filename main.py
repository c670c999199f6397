from __future__ import annotations

import argparse

from core.game import Game
from ui.console import ConsoleUI


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play two-player checkers in the console.")
	parser.add_argument("--white-name", default="Player 1", help="Name of the white player (moves first).")
	parser.add_argument("--black-name", default="Player 2", help="Name of the black player.")
	return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
	args = parse_args(argv)
	game = Game(args.white_name, args.black_name)
	ConsoleUI(game).run()


if __name__ == "__main__":
	main()
