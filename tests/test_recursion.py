import pytest

from structkit.recursion import (
    Move,
    factorial,
    fibonacci,
    hanoi,
    main,
    tail_factorial,
    tail_fibonacci,
)


def test_factorial_of_five():
    assert factorial(5) == 120


def test_fibonacci_of_five():
    assert fibonacci(5) == 5


@pytest.mark.parametrize("n", [0, 1])
def test_base_cases(n):
    assert factorial(n) == 1
    assert tail_factorial(n) == 1
    assert fibonacci(n) == n
    assert tail_fibonacci(n) == n


@pytest.mark.parametrize("n", range(2, 15))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


@pytest.mark.parametrize("n", range(0, 20))
def test_tail_versions_agree(n):
    assert tail_factorial(n) == factorial(n)
    assert tail_fibonacci(n) == fibonacci(n)


@pytest.mark.parametrize("n", range(2, 25))
def test_fibonacci_recurrence(n):
    assert tail_fibonacci(n) == tail_fibonacci(n - 1) + tail_fibonacci(n - 2)


@pytest.mark.parametrize("func", [factorial, fibonacci, tail_factorial, tail_fibonacci])
def test_negative_input_raises(func):
    with pytest.raises(ValueError):
        func(-1)


@pytest.mark.parametrize("n", [1, 2, 3, 5, 7])
def test_hanoi_moves_are_legal_and_complete(n):
    moves = hanoi(n, "A", "C", "B")
    assert len(moves) == 2**n - 1
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for move in moves:
        assert pegs[move.source][-1] == move.disk
        disk = pegs[move.source].pop()
        assert not pegs[move.destination] or pegs[move.destination][-1] > disk
        pegs[move.destination].append(disk)
    assert pegs["C"] == list(range(n, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_hanoi_single_disk():
    assert hanoi(1, "X", "Y", "Z") == [Move(1, "X", "Y")]


def test_hanoi_rejects_zero_disks():
    with pytest.raises(ValueError):
        hanoi(0)


def test_move_text():
    assert str(Move(1, "A", "C")) == "Move disk 1 from A to C"


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Factorial of 5:120"
    assert lines[4] == "Tower of Hanoi with 3 disks:"
    assert lines[5:] == [str(move) for move in hanoi(3, "A", "C", "B")]