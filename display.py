"""ASCII rendering of the three towers."""

from typing import List, Sequence

from towers import Board

SEPARATOR = "  "


def cell_width(num_disks: int) -> int:
    # Widest glyph is 2n+1 chars, keep room for the "Tower X" label
    return 2 * num_disks + 7


def disk_glyph(disk: int) -> str:
    return "*" * disk + str(disk) + "*" * disk


def render_board(board: Board, labels: Sequence[str] = ("A", "B", "C")) -> str:
    """
    Draw the board from the top level down.

    Each peg gets a fixed-width cell holding either a centred disk glyph
    or a "|" when the peg has no disk at that height.
    """
    width = cell_width(board.num_disks)
    lines: List[str] = [""]

    for level in range(board.num_disks - 1, -1, -1):
        cells = []
        for peg in board.pegs:
            disks = peg.disks
            if level < len(disks):
                cells.append(disk_glyph(disks[level]).center(width))
            else:
                cells.append("|".center(width))
        lines.append(SEPARATOR.join(cells).rstrip())

    lines.append(SEPARATOR.join(("=" * (width - 2)).center(width) for _ in board.pegs).rstrip())
    lines.append(SEPARATOR.join(f"Tower {label}".center(width) for label in labels).rstrip())
    lines.append("")
    return "\n".join(lines)
