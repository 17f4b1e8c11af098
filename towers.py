"""
Tower of Hanoi puzzle state and solver.

This module keeps the pieces shared by the console game and the verification tools:
- Bounded peg stacks
- Board state, move legality checks and the move counter
- Recursive optimal solver
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from config import GameConfig


def minimum_moves(num_disks: int) -> int:
    return 2 ** num_disks - 1


# ============================================================================
# Violation Types and Errors
# ============================================================================


class ViolationType:
    """Enumeration of Tower of Hanoi rule violations."""

    INVALID_PEG_NUMBER = "invalid_peg_number"
    SAME_PEG = "same_peg"
    SOURCE_PEG_EMPTY = "source_peg_empty"
    LARGER_ON_SMALLER = "larger_on_smaller"


@dataclass
class MoveViolation:
    """Represents a rejected move request."""

    violation_type: str
    from_peg: int
    to_peg: int
    description: str


class InvalidMoveError(ValueError):
    """Raised when a move breaks the puzzle rules."""

    def __init__(self, violation: MoveViolation):
        super().__init__(violation.description)
        self.violation = violation

    @property
    def violation_type(self) -> str:
        return self.violation.violation_type


class PegError(RuntimeError):
    """Internal error: a peg was used outside its bounds."""


class PegOverflowError(PegError):
    pass


class EmptyPegError(PegError):
    pass


class BoardInvariantError(RuntimeError):
    """Internal error: the board no longer holds a legal configuration."""


# ============================================================================
# Core State and Solver
# ============================================================================


class Peg:
    """Bounded stack of disks. The last element is the top disk."""

    def __init__(self, capacity: int = 8):
        self.capacity = capacity
        self._disks: List[int] = []

    def is_empty(self) -> bool:
        return not self._disks

    def is_full(self) -> bool:
        return len(self._disks) >= self.capacity

    def push(self, disk: int) -> None:
        if self.is_full():
            raise PegOverflowError(f"Peg overflow: cannot push disk {disk}, capacity is {self.capacity}")
        self._disks.append(disk)

    def pop(self) -> int:
        if self.is_empty():
            raise EmptyPegError("Cannot pop from an empty peg")
        return self._disks.pop()

    def peek(self) -> int:
        if self.is_empty():
            raise EmptyPegError("Cannot peek at an empty peg")
        return self._disks[-1]

    @property
    def disks(self) -> Tuple[int, ...]:
        """Disks from bottom to top."""
        return tuple(self._disks)

    def __len__(self) -> int:
        return len(self._disks)

    def __repr__(self):
        return f"Peg({list(self._disks)})"


@dataclass(frozen=True)
class Move:
    """One applied move. Pegs are 0-indexed."""

    number: int
    disk: int
    from_peg: int
    to_peg: int

    def describe(self, labels: Sequence[str] = ("A", "B", "C")) -> str:
        return (
            f"Move {self.number}: Disk {self.disk} "
            f"from Tower {labels[self.from_peg]} to Tower {labels[self.to_peg]}"
        )

    def as_list(self) -> List[int]:
        return [self.disk, self.from_peg, self.to_peg]


class Board:
    """
    Three pegs holding disks 1..num_disks.

    Pegs only change through apply_move, which validates the move and
    increments move_count.
    """

    NUM_PEGS = 3
    GOAL_PEG = 2

    def __init__(self, num_disks: int = 3, capacity: int = GameConfig.peg_capacity):
        if num_disks < 1 or num_disks > capacity:
            raise ValueError(f"Number of disks must be between 1 and {capacity}, got {num_disks}")

        self.num_disks = num_disks
        self.move_count = 0
        self.pegs = [Peg(capacity) for _ in range(self.NUM_PEGS)]

        # Largest first so disk 1 ends on top
        for disk in range(num_disks, 0, -1):
            self.pegs[0].push(disk)

    def _violation(self, violation_type: str, from_peg: int, to_peg: int, description: str) -> MoveViolation:
        return MoveViolation(
            violation_type=violation_type,
            from_peg=from_peg,
            to_peg=to_peg,
            description=description,
        )

    def check_move(self, from_peg: int, to_peg: int) -> Optional[MoveViolation]:
        """Return the first rule the move breaks, or None if it is legal."""
        if not (0 <= from_peg < self.NUM_PEGS and 0 <= to_peg < self.NUM_PEGS):
            return self._violation(
                ViolationType.INVALID_PEG_NUMBER, from_peg, to_peg,
                f"Invalid peg index in move: {from_peg} -> {to_peg}",
            )
        if from_peg == to_peg:
            return self._violation(
                ViolationType.SAME_PEG, from_peg, to_peg,
                f"Source and destination are both peg {from_peg}",
            )

        source = self.pegs[from_peg]
        target = self.pegs[to_peg]
        if source.is_empty():
            return self._violation(
                ViolationType.SOURCE_PEG_EMPTY, from_peg, to_peg,
                f"Source peg {from_peg} is empty",
            )
        if not target.is_empty() and source.peek() > target.peek():
            return self._violation(
                ViolationType.LARGER_ON_SMALLER, from_peg, to_peg,
                f"Cannot place disk {source.peek()} on smaller disk {target.peek()}",
            )
        return None

    def is_valid_move(self, from_peg: int, to_peg: int) -> bool:
        if not (0 <= from_peg < self.NUM_PEGS and 0 <= to_peg < self.NUM_PEGS):
            return False

        source = self.pegs[from_peg]
        target = self.pegs[to_peg]
        if source.is_empty():
            return False
        if target.is_empty():
            return True
        return source.peek() < target.peek()

    def apply_move(self, from_peg: int, to_peg: int) -> Move:
        violation = self.check_move(from_peg, to_peg)
        if violation is not None:
            raise InvalidMoveError(violation)

        disk = self.pegs[from_peg].pop()
        self.pegs[to_peg].push(disk)
        self.move_count += 1
        return Move(number=self.move_count, disk=disk, from_peg=from_peg, to_peg=to_peg)

    def is_solved(self) -> bool:
        return len(self.pegs[self.GOAL_PEG]) == self.num_disks

    def check_invariants(self) -> None:
        for index, peg in enumerate(self.pegs):
            disks = peg.disks
            for i in range(len(disks) - 1):
                if disks[i] <= disks[i + 1]:
                    raise BoardInvariantError(
                        f"Invalid peg ordering on peg {index}: {list(disks)}"
                    )

        all_disks = sorted(d for peg in self.pegs for d in peg.disks)
        expected = list(range(1, self.num_disks + 1))
        if all_disks != expected:
            raise BoardInvariantError(
                f"Board must contain each disk exactly once (expected {expected}, got {all_disks})"
            )

    def as_lists(self) -> List[List[int]]:
        return [list(peg.disks) for peg in self.pegs]

    def __str__(self):
        return f"0:{list(self.pegs[0].disks)} 1:{list(self.pegs[1].disks)} 2:{list(self.pegs[2].disks)}"


class TowersOfHanoiSolver:
    """Classic recursive solver, produces the 2^n - 1 move optimal sequence."""

    @staticmethod
    def generate_moves(num_disks: int, source: int = 0, auxiliary: int = 1, destination: int = 2) -> List[List[int]]:
        """Optimal move list [[disk, from, to], ...] without touching a board."""
        moves = []

        def _hanoi(n, src, aux, dst):
            if n == 0:
                return
            _hanoi(n - 1, src, dst, aux)
            moves.append([n, src, dst])
            _hanoi(n - 1, aux, src, dst)

        _hanoi(num_disks, source, auxiliary, destination)
        return moves

    def solve(self, board: Board, on_move: Optional[Callable[[Move], None]] = None) -> List[Move]:
        """
        Move every disk from peg A to peg C on the given board.

        Each move goes through Board.apply_move, so an illegal step would
        raise InvalidMoveError instead of corrupting the board.
        """
        applied: List[Move] = []

        def _apply(from_peg: int, to_peg: int) -> None:
            move = board.apply_move(from_peg, to_peg)
            applied.append(move)
            if on_move is not None:
                on_move(move)

        def _solve(n: int, source: int, auxiliary: int, destination: int) -> None:
            if n == 1:
                _apply(source, destination)
                return

            # Move n-1 disks out of the way onto the auxiliary peg
            _solve(n - 1, source, destination, auxiliary)

            _apply(source, destination)

            # Bring the n-1 disks back on top of the largest one
            _solve(n - 1, auxiliary, source, destination)

        _solve(board.num_disks, 0, 1, 2)
        return applied
