# cli.py: print one N-queens placement to stdout
from __future__ import annotations

import os
import sys
from argparse import ArgumentParser
from typing import List, Optional

from config import CFG
from io_files import print_board, write_board
from models import InvalidSize
from render import render_result
from solver.backtracking import SEARCH_MODES
from solver.orchestrator import parse_size, solve_board


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Print one solution to the N-queens puzzle.")
    parser.add_argument("n", nargs="?", default=str(CFG.DEFAULT_N), help="board size (1..31)")
    parser.add_argument("--mode", choices=sorted(SEARCH_MODES), default=None,
                        help="search driver (default: NQ_SEARCH_MODE)")
    parser.add_argument("--verify", action="store_true",
                        help="re-check the placement with CP-SAT")
    parser.add_argument("--out", default=None,
                        help="also write the board to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        result = solve_board(parse_size(args.n), mode=args.mode, verify=args.verify or None)
    except InvalidSize as e:
        print(str(e), file=sys.stderr)
        return 2

    text = render_result(result)
    print_board(text)

    if args.out:
        write_board(text, os.getcwd(), args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
