"""
Tests for the interactive session, driven by scripted input.
"""

from config import GameConfig
from display import cell_width, render_board
from game import AUTOMATIC, MANUAL, GameSession, SessionState, main
from towers import Board


def scripted_session(answers, config=None):
    """Build a session that reads from `answers` and collects output lines."""
    remaining = iter(answers)
    prompts = []
    output = []

    def reader(prompt):
        prompts.append(prompt)
        return next(remaining)

    session = GameSession(config=config, reader=reader, writer=output.append)
    return session, prompts, output


def test_render_board():
    """Test ASCII tower layout."""
    print("=" * 60)
    print("Testing Board Rendering")
    print("=" * 60)

    board = Board(num_disks=3)
    text = render_board(board)
    print(text)

    rows = text.strip("\n").split("\n")
    assert len(rows) == 3 + 2, "One row per level plus base and labels"
    width = cell_width(3)

    # Top level holds disk 1 on A only
    assert rows[0].startswith("*1*".center(width))
    assert rows[2].startswith("***3***".center(width))
    assert rows[0].count("|") == 2
    assert "=" * (width - 2) in rows[3]
    assert "Tower A" in rows[4] and "Tower B" in rows[4] and "Tower C" in rows[4]

    board.apply_move(0, 2)
    rows = render_board(board).strip("\n").split("\n")
    assert rows[0].count("|") == 3
    assert rows[2].rstrip().endswith("*1*")
    print()


def test_manual_optimal_session():
    """n=3, A->C, A->B, C->B, A->C, B->A, B->C, A->C."""
    print("=" * 60)
    print("Testing Manual Session")
    print("=" * 60)

    moves = ["1 3", "1 2", "3 2", "1 3", "2 1", "2 3", "1 3"]
    session, prompts, output = scripted_session(["3", "1"] + moves)
    result = session.run()

    assert result.mode == MANUAL
    assert result.moves == 7
    assert result.minimum_moves == 7
    assert result.is_optimal
    assert result.extra_moves == 0
    assert session.state == SessionState.TERMINAL
    assert session.board.is_solved()

    assert "Move 1: Disk 1 from Tower A to Tower C" in output
    assert "Move 4: Disk 3 from Tower A to Tower C" in output
    assert "Your moves: 7" in output
    assert "Minimum moves: 7" in output
    assert any(line.startswith("PERFECT!") for line in output)
    assert sum(1 for p in prompts if "Enter move (from to)" in p) == 7
    print("✓ Solved optimally in 7 moves")
    print()


def test_manual_rejections():
    """Test that each kind of bad input gets its own message and changes nothing."""
    answers = [
        "2", "1",
        "2 1",  # B is empty
        "1 2",  # disk 1 onto B
        "1 2",  # disk 2 onto disk 1
        "4 1",  # no tower 4
        "3 3",  # same tower
        "left right",
        "1 3",
        "2 3",
    ]
    session, _, output = scripted_session(answers)
    result = session.run()

    assert "Invalid move! Source tower is empty." in output
    assert "Invalid move! Cannot place larger disk on smaller disk." in output
    assert "Invalid tower number! Use 1, 2, or 3." in output
    assert "Source and destination cannot be same!" in output
    assert "Invalid input! Enter two tower numbers, e.g. 1 3." in output

    # Rejected attempts are not counted
    assert result.moves == 3
    assert result.is_optimal
    assert output.index("Invalid move! Source tower is empty.") < output.index(
        "Move 1: Disk 1 from Tower A to Tower B"
    )


def test_manual_extra_moves():
    session, _, output = scripted_session(["1", "1", "1 2", "2 3"])
    result = session.run()

    assert result.moves == 2
    assert not result.is_optimal
    assert result.extra_moves == 1
    assert "You took 1 extra moves." in output


def test_automatic_single_disk():
    session, prompts, output = scripted_session(["1", "2", ""])
    result = session.run()

    assert result.mode == AUTOMATIC
    assert result.moves == 1
    assert result.is_optimal
    move_lines = [line for line in output if line.startswith("Move ")]
    assert move_lines == ["Move 1: Disk 1 from Tower A to Tower C"]
    assert "Total moves: 1" in output
    assert "This is the optimal solution!" in output
    assert prompts[-1] == "Press Enter to start solving..."


def test_automatic_reports_every_move():
    for n in range(1, 9):
        session, _, output = scripted_session([str(n), "2", ""])
        result = session.run()
        move_lines = [line for line in output if line.startswith("Move ")]
        assert len(move_lines) == 2 ** n - 1
        assert result.moves == 2 ** n - 1
        assert f"Total moves: {2 ** n - 1}" in output
        assert session.board.as_lists() == [[], [], list(range(n, 0, -1))]


def test_any_other_mode_is_automatic():
    for choice in ["2", "7", "0", "manual"]:
        session, _, _ = scripted_session(["2", choice, ""])
        assert session.run().mode == AUTOMATIC


def test_disk_count_substitution():
    """Test that out-of-range disk counts fall back to 3."""
    print("=" * 60)
    print("Testing Disk Count Substitution")
    print("=" * 60)

    for requested in ["0", "9", "-2", "abc", ""]:
        session, _, output = scripted_session([requested, "2", ""])
        result = session.run()
        assert result.num_disks == 3, f"Expected fallback for {requested!r}"
        assert "Invalid number! Using 3 disks." in output
        assert result.moves == 7
        print(f"  ✓ {requested!r} -> 3 disks")

    session, _, output = scripted_session(["8", "2", ""])
    assert session.run().num_disks == 8
    assert "Invalid number! Using 3 disks." not in output
    print()


def test_run_with_preset_arguments():
    session, prompts, output = scripted_session([""])
    result = session.run(num_disks=9, mode=AUTOMATIC)

    assert result.num_disks == 3
    assert "Invalid number! Using 3 disks." in output
    assert prompts == ["Press Enter to start solving..."]


def test_session_uses_config():
    config = GameConfig(min_disks=1, max_disks=4, default_disks=2, peg_capacity=4)
    session, prompts, output = scripted_session(["5", "2", ""], config=config)
    result = session.run()

    assert prompts[0].strip() == "Enter number of disks (1-4):"
    assert "Invalid number! Using 2 disks." in output
    assert result.moves == 3


def test_main_automatic(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "")
    assert main(["--disks", "2", "--mode", "automatic"]) == 0

    out = capsys.readouterr().out
    assert "Move 3: Disk 1 from Tower B to Tower C" in out
    assert "Total moves: 3" in out


def test_main_aborts_on_eof(monkeypatch, capsys):
    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert main(["--mode", "manual"]) == 1
    assert "Game aborted." in capsys.readouterr().out


def main_tests():
    """Run the tests that do not need pytest fixtures."""
    print("\n" + "=" * 60)
    print("RUNNING TOWER OF HANOI SESSION TESTS")
    print("=" * 60 + "\n")

    test_render_board()
    test_manual_optimal_session()
    test_manual_rejections()
    test_manual_extra_moves()
    test_automatic_single_disk()
    test_automatic_reports_every_move()
    test_any_other_mode_is_automatic()
    test_disk_count_substitution()
    test_run_with_preset_arguments()
    test_session_uses_config()

    print("=" * 60)
    print("ALL TESTS PASSED! ✓")
    print("=" * 60)


if __name__ == "__main__":
    main_tests()
