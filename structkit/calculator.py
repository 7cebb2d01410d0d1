"""Infix to postfix conversion and evaluation of single-digit expressions."""

from __future__ import annotations

import math
import sys

OPERATORS = "+-*/"

EXAMPLE_EXPRESSION = "3+5*2-(8/4)+1+9"


def precedence(one: str, two: str) -> int:
    """Compare two operators: 1 if ``one`` binds tighter, -1 if looser, else 0."""
    additive = "+-"
    multiplicative = "*/"
    if one in additive and two in additive:
        return 0
    if one in multiplicative and two in additive:
        return 1
    if one in additive and two in multiplicative:
        return -1
    if one == "(" and two != ")":
        return 1
    if one != "(" and two == ")":
        return -1
    return 0


def to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix form.

    Alphanumeric characters are operands; characters that are neither
    operands, brackets nor operators are skipped.
    """
    output: list[str] = []
    operators: list[str] = []
    for ch in expression:
        if ch.isalnum():
            output.append(ch)
        elif ch == "(":
            operators.append(ch)
        elif ch == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if operators:
                operators.pop()
        elif ch in OPERATORS:
            while (
                operators
                and operators[-1] != "("
                and precedence(operators[-1], ch) >= 0
            ):
                output.append(operators.pop())
            operators.append(ch)
    output.extend(op for op in reversed(operators) if op not in "()")
    return "".join(output)


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def evaluate_postfix(postfix: str) -> float:
    """Evaluate a postfix expression of single-digit operands.

    Raises ValueError when the expression is malformed.
    """
    operands: list[float] = []
    for ch in postfix:
        if ch.isdigit():
            operands.append(float(ch))
            continue
        if ch not in OPERATORS:
            raise ValueError(f"unsupported token {ch!r}")
        if len(operands) < 2:
            raise ValueError(f"missing operand for {ch!r}")
        right = operands.pop()
        left = operands.pop()
        if ch == "+":
            operands.append(left + right)
        elif ch == "-":
            operands.append(left - right)
        elif ch == "*":
            operands.append(left * right)
        else:
            operands.append(_divide(left, right))
    if not operands:
        raise ValueError("empty expression")
    return operands[-1]


class Calculator:
    """Evaluates an infix expression through its postfix form."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.postfix = ""
        self.result: float | None = None

    def calculate(self) -> float:
        """Convert, evaluate and remember the result."""
        self.postfix = to_postfix(self.expression)
        self.result = evaluate_postfix(self.postfix)
        return self.result


def _format_number(value: float) -> str:
    return f"{value:g}"


def main(argv: list[str] | None = None) -> int:
    """Evaluate an expression given on the command line, or the built-in example."""
    args = sys.argv[1:] if argv is None else argv
    expression = args[0] if args else EXAMPLE_EXPRESSION
    calculator = Calculator(expression)
    try:
        result = calculator.calculate()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Result : {_format_number(result)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())