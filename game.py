"""
Interactive Tower of Hanoi console game.

A session asks for a disk count and a mode, then either lets the player
move disks by hand until every disk sits on Tower C, or runs the recursive
solver and prints each move.

Usage:
    python game.py
    python game.py --disks 4 --mode automatic
"""

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from config import GameConfig
from display import render_board
from towers import Board, Move, TowersOfHanoiSolver, ViolationType, minimum_moves

MANUAL = "manual"
AUTOMATIC = "automatic"

VIOLATION_MESSAGES = {
    ViolationType.INVALID_PEG_NUMBER: "Invalid tower number! Use 1, 2, or 3.",
    ViolationType.SAME_PEG: "Source and destination cannot be same!",
    ViolationType.SOURCE_PEG_EMPTY: "Invalid move! Source tower is empty.",
    ViolationType.LARGER_ON_SMALLER: "Invalid move! Cannot place larger disk on smaller disk.",
}

RULES = [
    "GAME RULES:",
    "1. Move all disks from Tower A to Tower C",
    "2. Only one disk can be moved at a time",
    "3. Larger disk cannot be placed on smaller disk",
    "4. You can use Tower B as auxiliary",
]


class SessionState:
    """Lifecycle of one game session."""

    INITIALIZING = "initializing"
    AWAITING_MODE_CHOICE = "awaiting_mode_choice"
    MANUAL_PLAY = "manual_play"
    AUTOMATIC_SOLVE = "automatic_solve"
    TERMINAL = "terminal"


@dataclass
class SessionResult:
    """Summary of a finished session."""

    num_disks: int
    mode: str
    moves: int
    minimum_moves: int
    is_optimal: bool
    extra_moves: int


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _parse_move(text: str) -> Optional[Tuple[int, int]]:
    parts = text.split()
    if len(parts) != 2:
        return None
    from_peg, to_peg = _parse_int(parts[0]), _parse_int(parts[1])
    if from_peg is None or to_peg is None:
        return None
    return from_peg, to_peg


class GameSession:
    """
    Owns the board and the move counter for a single playthrough.

    reader/writer default to input/print and can be swapped out to drive
    a session from a script.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        reader: Optional[Callable[[str], str]] = None,
        writer: Optional[Callable[[str], None]] = None,
    ):
        self.config = config or GameConfig()
        self.reader = reader or input
        self.writer = writer or print
        self.solver = TowersOfHanoiSolver()
        self.board: Optional[Board] = None
        self.mode: Optional[str] = None
        self.state = SessionState.INITIALIZING

    def _banner(self, title: str) -> None:
        self.writer("\n" + "=" * 40)
        self.writer(title)
        self.writer("=" * 40)

    def show_board(self) -> None:
        self.writer(render_board(self.board, self.config.peg_labels))

    def resolve_disk_count(self, requested: Optional[int]) -> int:
        cfg = self.config
        if requested is None or requested < cfg.min_disks or requested > cfg.max_disks:
            self.writer(f"Invalid number! Using {cfg.default_disks} disks.")
            return cfg.default_disks
        return requested

    def prompt_disk_count(self) -> int:
        cfg = self.config
        answer = self.reader(f"\nEnter number of disks ({cfg.min_disks}-{cfg.max_disks}): ")
        return self.resolve_disk_count(_parse_int(answer))

    def prompt_mode(self) -> str:
        self.writer("\nChoose mode: 1=Manual, 2=Automatic")
        choice = _parse_int(self.reader("Enter choice: "))
        return MANUAL if choice == 1 else AUTOMATIC

    def print_rules(self) -> None:
        self.writer("\n" + "=" * 40)
        for line in RULES:
            self.writer(line)
        self.writer("=" * 40)

    def _report_move(self, move: Move) -> None:
        self.writer(move.describe(self.config.peg_labels))

    def play_manual(self) -> int:
        self.state = SessionState.MANUAL_PLAY
        board = self.board
        min_moves = minimum_moves(board.num_disks)

        self.writer(f"\nMinimum moves required: {min_moves}")
        labels = self.config.peg_labels
        self.writer("\nTower numbers: " + ", ".join(f"{label}={i + 1}" for i, label in enumerate(labels)))

        while not board.is_solved():
            requested = _parse_move(self.reader("\nEnter move (from to) [e.g., 1 3]: "))
            if requested is None:
                self.writer("Invalid input! Enter two tower numbers, e.g. 1 3.")
                continue

            # 1-indexed for the player
            from_peg, to_peg = requested[0] - 1, requested[1] - 1
            violation = board.check_move(from_peg, to_peg)
            if violation is not None:
                self.writer(VIOLATION_MESSAGES[violation.violation_type])
                continue

            self._report_move(board.apply_move(from_peg, to_peg))
            self.show_board()

        moves = board.move_count
        self._banner("🎉 CONGRATULATIONS! YOU WON! 🎉")
        self.writer(f"Your moves: {moves}")
        self.writer(f"Minimum moves: {min_moves}")
        if moves == min_moves:
            self.writer("PERFECT! You solved it optimally! ⭐")
        else:
            self.writer(f"You took {moves - min_moves} extra moves.")
        return moves

    def play_automatic(self) -> int:
        self.state = SessionState.AUTOMATIC_SOLVE
        board = self.board

        self.writer("\nSolving automatically...")
        self.reader("Press Enter to start solving...")

        self.solver.solve(board, on_move=self._report_move)

        self.writer("\nFinal State:")
        self.show_board()

        self._banner("✅ SOLVED!")
        self.writer(f"Total moves: {board.move_count}")
        self.writer("This is the optimal solution!")
        return board.move_count

    def run(self, num_disks: Optional[int] = None, mode: Optional[str] = None) -> SessionResult:
        self.state = SessionState.INITIALIZING
        self._banner("    TOWER OF HANOI GAME")

        if num_disks is None:
            num_disks = self.prompt_disk_count()
        else:
            num_disks = self.resolve_disk_count(num_disks)
        self.board = Board(num_disks, capacity=self.config.peg_capacity)

        self.print_rules()

        self.state = SessionState.AWAITING_MODE_CHOICE
        self.mode = mode if mode is not None else self.prompt_mode()

        self.writer("\nInitial State:")
        self.show_board()

        if self.mode == MANUAL:
            moves = self.play_manual()
        else:
            moves = self.play_automatic()

        self.state = SessionState.TERMINAL
        min_moves = minimum_moves(num_disks)
        return SessionResult(
            num_disks=num_disks,
            mode=self.mode,
            moves=moves,
            minimum_moves=min_moves,
            is_optimal=moves == min_moves,
            extra_moves=moves - min_moves,
        )


# ============================================================================
# Main
# ============================================================================

def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Play the Tower of Hanoi puzzle in the terminal"
    )
    parser.add_argument("--disks", type=int, default=None,
                        help="Number of disks (skips the prompt, out of range falls back to 3)")
    parser.add_argument("--mode", type=str, default=None,
                        choices=[MANUAL, AUTOMATIC],
                        help="Play mode (skips the prompt)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    session = GameSession()

    try:
        session.run(num_disks=args.disks, mode=args.mode)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
