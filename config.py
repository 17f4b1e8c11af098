"""
Configuration classes for the Tower of Hanoi console game.

This module contains:
- GameConfig: Puzzle limits and peg labels for an interactive session
- VerifyConfig: Disk range for batch solver verification
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class GameConfig:
    """Interactive session configuration."""
    # Disk count accepted from the player
    min_disks: int = 1
    max_disks: int = 8
    default_disks: int = 3  # Substituted when the requested count is out of range

    # Pegs
    peg_capacity: int = 8  # Must be >= max_disks
    peg_labels: List[str] = field(default_factory=lambda: ["A", "B", "C"])


@dataclass
class VerifyConfig:
    """Solver verification configuration."""
    min_disks: int = 1
    max_disks: int = 8

    # State graph has 3^n nodes, cross-check only up to this size
    graph_max_disks: int = 8
