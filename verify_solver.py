"""
Verify the recursive solver over a range of disk counts.

For each disk count the solver runs on a fresh Board. Every move must be
legal when applied, the board invariants must hold after every move, the
total must equal 2^n - 1, and (for small n) it must match the BFS shortest
path through the full state graph.
"""

import argparse
import sys
from typing import Dict

from tqdm import tqdm

from config import VerifyConfig
from state_space_graph import shortest_solution_length
from towers import Board, BoardInvariantError, TowersOfHanoiSolver, minimum_moves


def verify_disk_count(num_disks: int, graph_max_disks: int, solver: TowersOfHanoiSolver = None) -> Dict:
    solver = solver or TowersOfHanoiSolver()
    board = Board(num_disks)
    invalid_steps = []

    def _check(move):
        try:
            board.check_invariants()
        except BoardInvariantError as e:
            invalid_steps.append((move.number, str(e)))

    moves = solver.solve(board, on_move=_check)

    expected = minimum_moves(num_disks)
    final_ok = board.as_lists() == [[], [], list(range(num_disks, 0, -1))]

    shortest = None
    if num_disks <= graph_max_disks:
        shortest = shortest_solution_length(num_disks)

    return {
        "num_disks": num_disks,
        "moves": len(moves),
        "expected": expected,
        "shortest_path": shortest,
        "invalid_steps": invalid_steps,
        "final_ok": final_ok,
        "passed": (
            len(moves) == expected
            and final_ok
            and not invalid_steps
            and (shortest is None or shortest == len(moves))
        ),
    }


def print_summary(results) -> None:
    print("=" * 60)
    print(f"{'Disks':<8} {'Moves':<8} {'2^n-1':<8} {'Shortest':<10} {'Result':<8}")
    print("-" * 60)
    for r in results:
        shortest = "-" if r["shortest_path"] is None else r["shortest_path"]
        print(
            f"{r['num_disks']:<8} {r['moves']:<8} {r['expected']:<8} "
            f"{shortest!s:<10} {'PASS' if r['passed'] else 'FAIL':<8}"
        )
        for step, error in r["invalid_steps"]:
            print(f"    step {step}: {error}")
    passed = sum(1 for r in results if r["passed"])
    print("-" * 60)
    print(f"Passed: {passed}/{len(results)}")


def main() -> int:
    defaults = VerifyConfig()
    parser = argparse.ArgumentParser(description="Verify the Tower of Hanoi solver for a range of disk counts.")
    parser.add_argument("--min_disks", type=int, default=defaults.min_disks)
    parser.add_argument("--max_disks", type=int, default=defaults.max_disks)
    parser.add_argument("--graph_max_disks", type=int, default=defaults.graph_max_disks,
                        help="Largest disk count to cross-check against the state graph")
    args = parser.parse_args()

    solver = TowersOfHanoiSolver()
    results = []
    for num_disks in tqdm(range(args.min_disks, args.max_disks + 1), desc="Disk counts"):
        results.append(verify_disk_count(num_disks, args.graph_max_disks, solver))

    print_summary(results)
    return 0 if all(r["passed"] for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
