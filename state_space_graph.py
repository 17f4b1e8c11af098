"""
Full Tower of Hanoi state space as a graph.

Every legal configuration of n disks is a node (3^n of them) and two nodes
are joined when a single legal move turns one into the other. The shortest
path between the all-on-A and all-on-C states gives an independent check
on the recursive solver's move count.
"""

import argparse
import itertools
from typing import List, Tuple

import networkx as nx

from towers import TowersOfHanoiSolver

State = Tuple[Tuple[int, ...], Tuple[int, ...], Tuple[int, ...]]


def all_states(num_disks: int) -> List[State]:
    """Generate all valid states for num_disks disks on 3 pegs."""
    states = []
    for assignment in itertools.product(range(3), repeat=num_disks):
        # assignment[i] = peg for disk (i+1)
        pegs = [[], [], []]
        for disk in range(num_disks, 0, -1):
            pegs[assignment[disk - 1]].append(disk)
        states.append(tuple(tuple(p) for p in pegs))
    return states


def get_neighbors(state: State) -> List[State]:
    """Get all valid neighbor states (one move away)."""
    neighbors = []
    for from_peg in range(3):
        if not state[from_peg]:
            continue
        disk = state[from_peg][-1]
        for to_peg in range(3):
            if from_peg == to_peg:
                continue
            if state[to_peg] and state[to_peg][-1] < disk:
                continue
            new_pegs = [list(p) for p in state]
            new_pegs[from_peg].pop()
            new_pegs[to_peg].append(disk)
            neighbors.append(tuple(tuple(p) for p in new_pegs))
    return neighbors


def build_state_graph(num_disks: int) -> nx.Graph:
    G = nx.Graph()
    states = all_states(num_disks)
    G.add_nodes_from(states)

    for s in states:
        for neighbor in get_neighbors(s):
            if not G.has_edge(s, neighbor):
                G.add_edge(s, neighbor)

    return G


def tower_state(num_disks: int, peg: int) -> State:
    pegs = [(), (), ()]
    pegs[peg] = tuple(range(num_disks, 0, -1))
    return tuple(pegs)


def shortest_solution_length(num_disks: int, G: nx.Graph = None) -> int:
    if G is None:
        G = build_state_graph(num_disks)
    return nx.shortest_path_length(G, tower_state(num_disks, 0), tower_state(num_disks, 2))


def moves_to_states(moves: List[List[int]], num_disks: int) -> List[State]:
    """Replay [disk, from, to] moves from the all-on-A state."""
    pegs = [list(range(num_disks, 0, -1)), [], []]
    states = [tuple(tuple(p) for p in pegs)]

    for step, (disk, from_peg, to_peg) in enumerate(moves, start=1):
        if not pegs[from_peg] or pegs[from_peg][-1] != disk:
            raise ValueError(
                f"Step {step}: disk {disk} is not on top of peg {from_peg}. "
                f"Current pegs={pegs}"
            )
        pegs[to_peg].append(pegs[from_peg].pop())
        states.append(tuple(tuple(p) for p in pegs))

    return states


def state_label(state: State, num_disks: int) -> str:
    """Label like '1113': peg number (1..3) of each disk, largest disk first."""
    disk_to_peg = {}
    for peg_idx, peg in enumerate(state):
        for disk in peg:
            disk_to_peg[disk] = peg_idx
    return "".join(str(disk_to_peg[disk] + 1) for disk in range(num_disks, 0, -1))


def path_follows_graph(G: nx.Graph, states: List[State]) -> bool:
    return all(G.has_edge(u, v) for u, v in zip(states, states[1:]))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Build the Tower of Hanoi state graph and trace the solver's path through it."
    )
    parser.add_argument("--num_disks", type=int, default=3)
    args = parser.parse_args()

    num_disks = args.num_disks
    G = build_state_graph(num_disks)
    print(f"{num_disks} disks: {G.number_of_nodes()} states, {G.number_of_edges()} edges")

    moves = TowersOfHanoiSolver.generate_moves(num_disks)
    states = moves_to_states(moves, num_disks)
    print(" -> ".join(state_label(s, num_disks) for s in states))

    shortest = shortest_solution_length(num_disks, G)
    print(f"Solver moves: {len(moves)}, shortest path: {shortest}")
    print(f"Path follows graph edges: {path_follows_graph(G, states)}")
    print("Optimal" if len(moves) == shortest else "NOT optimal")


if __name__ == "__main__":
    main()
