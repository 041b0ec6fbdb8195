#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py show --layout FILE [--origin {top-left,bottom-left}]
    python main.py play --layout FILE [--origin {top-left,bottom-left}]

Layout files hold one row per line: '*' (or 'x', '1') for a mine,
'.' (or '0', '-', '_') for a free cell.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from sweeper import Game, GameConfig, Origin, draw_board, parse_layout


PLAY_HELP = "Commands: r X Y (reveal), f X Y (flag), u X Y (unflag), q (quit)"


def load_game(layout_path: str, origin: str) -> Optional[Game]:
    """Build a game sized to the layout file and set its mines."""
    try:
        rows = parse_layout(Path(layout_path).read_text())
    except (OSError, ValueError) as exc:
        print(f"Cannot read layout {layout_path}: {exc}", file=sys.stderr)
        return None

    if not rows:
        print(f"Layout {layout_path} is empty", file=sys.stderr)
        return None

    game = Game(GameConfig(width=len(rows[0]), height=len(rows), origin=Origin(origin)))
    if not game.set_mines(rows):
        print(f"Layout {layout_path} has rows of different lengths", file=sys.stderr)
        return None
    return game


def show(args: argparse.Namespace) -> int:
    """Print the board with every cell revealed."""
    game = load_game(args.layout, args.origin)
    if game is None:
        return 1

    solution: List[List[str]] = []
    for r in range(game.height):
        y = game.grid.row_index(r)
        row = []
        for x in range(game.width):
            if game.grid.cell_at(x, y).has_mine:
                row.append("X")
            else:
                row.append(str(game.count_neighbor_mines(x, y) or "_"))
        solution.append(row)

    print(f"Board: {game.width}x{game.height} with {game.mine_count} mines")
    print(draw_board(solution))
    return 0


def play(args: argparse.Namespace, stream: TextIO = sys.stdin) -> int:
    """Play a game interactively from commands on stdin."""
    game = load_game(args.layout, args.origin)
    if game is None:
        return 1

    actions = {"r": game.reveal, "f": game.flag, "u": game.unflag}

    print(PLAY_HELP)
    print(draw_board(game.snapshot()))

    for line in stream:
        parts = line.split()
        if not parts:
            continue
        if parts[0] == "q":
            break
        if parts[0] not in actions or len(parts) != 3:
            print(PLAY_HELP)
            continue
        try:
            x, y = int(parts[1]), int(parts[2])
        except ValueError:
            print(f"Coordinates must be integers: {line.strip()}")
            continue

        if parts[0] == "r" and not game.can_reveal(x, y):
            print(f"Cannot reveal ({x}, {y})")
        actions[parts[0]](x, y)

        print(draw_board(game.snapshot()))
        if not game.is_running:
            break

    if game.is_won:
        print("\n*** WIN! ***")
    elif game.is_lost:
        print("\n*** LOST (hit mine) ***")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play a fixed mine layout"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine decisions"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for name, help_text in (
        ("show", "Print the solved board for a layout"),
        ("play", "Play a layout interactively"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--layout", required=True, help="Layout file")
        sub.add_argument(
            "--origin",
            choices=[origin.value for origin in Origin],
            default=Origin.TOP_LEFT.value,
            help="Where y = 0 sits in the layout file",
        )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "show":
        return show(args)
    if args.command == "play":
        return play(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
