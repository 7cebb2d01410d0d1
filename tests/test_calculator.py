import math

import pytest

from structkit.calculator import (
    EXAMPLE_EXPRESSION,
    Calculator,
    evaluate_postfix,
    main,
    precedence,
    to_postfix,
)


@pytest.mark.parametrize(
    "one, two, expected",
    [
        ("+", "-", 0),
        ("-", "+", 0),
        ("*", "+", 1),
        ("/", "-", 1),
        ("+", "*", -1),
        ("-", "/", -1),
        ("(", "+", 1),
        ("+", ")", -1),
        ("(", ")", 0),
        ("*", "/", 0),
    ],
)
def test_precedence(one, two, expected):
    assert precedence(one, two) == expected


def test_example_postfix():
    assert to_postfix(EXAMPLE_EXPRESSION) == "352*+84/-1+9+"


def test_example_result():
    assert Calculator(EXAMPLE_EXPRESSION).calculate() == 21


@pytest.mark.parametrize("expression", ["1+2*3", "(1+2)*3", "9-4/2+(7*8)", "a+b*c"])
def test_postfix_keeps_operands_in_order_and_drops_brackets(expression):
    postfix = to_postfix(expression)
    operands = [ch for ch in expression if ch.isalnum()]
    assert [ch for ch in postfix if ch.isalnum()] == operands
    assert "(" not in postfix and ")" not in postfix
    assert sorted(postfix) == sorted(ch for ch in expression if ch not in "()")


def test_spaces_are_ignored():
    assert to_postfix("1 + 2 * 3") == to_postfix("1+2*3")


def test_brackets_change_grouping():
    assert to_postfix("(1+2)*3") != to_postfix("1+2*3")
    assert to_postfix("(1+2)*3").endswith("*")


@pytest.mark.parametrize("left, right", [(1, 2), (9, 3), (4, 7)])
def test_single_operations(left, right):
    assert evaluate_postfix(f"{left}{right}+") == left + right
    assert evaluate_postfix(f"{left}{right}-") == left - right
    assert evaluate_postfix(f"{left}{right}*") == left * right
    assert evaluate_postfix(f"{left}{right}/") == pytest.approx(left / right)


def test_left_associativity_of_subtraction():
    assert Calculator("8-4-2").calculate() == (8 - 4) - 2


def test_division_by_zero_gives_infinity():
    infinite = Calculator("5/0").calculate()
    assert infinite == math.inf
    not_a_number = Calculator("0/0").calculate()
    assert str(not_a_number) == "nan"


def test_calculator_remembers_postfix_and_result():
    calc = Calculator("2*(3+4)")
    value = calc.calculate()
    assert calc.postfix == to_postfix("2*(3+4)")
    assert calc.result == value == evaluate_postfix(calc.postfix)


@pytest.mark.parametrize("postfix", ["", "+", "1+", "ab+"])
def test_malformed_postfix_raises(postfix):
    with pytest.raises(ValueError):
        evaluate_postfix(postfix)


def test_empty_expression_raises():
    with pytest.raises(ValueError):
        Calculator("").calculate()


def test_main_prints_example_result(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "Result : 21"


def test_main_reports_bad_expression(capsys):
    assert main(["+"]) == 1
    assert "error" in capsys.readouterr().err