"""Recursive-descent evaluator for expressions in one variable ``x``."""

from __future__ import annotations

import math
from typing import Callable

_DIGITS = frozenset("0123456789")
_SPACES = frozenset(" \t\n\v\f\r")
_FUNCTION_STARTS = ("sin", "cos", "tg", "tan", "ln", "lg", "log")


class ParseError(ValueError):
    """Raised when an expression cannot be parsed or evaluated."""


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _finite_only(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(value: float) -> float:
        return func(value) if math.isfinite(value) else math.nan

    return wrapped


def _logarithm(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(value: float) -> float:
        if math.isnan(value) or value < 0:
            return math.nan
        if value == 0:
            return -math.inf
        return func(value)

    return wrapped


def _sqrt(value: float) -> float:
    return math.nan if value < 0 else math.sqrt(value)


_tan = _finite_only(math.tan)


def _cot(value: float) -> float:
    tangent = _tan(value)
    if tangent == 0:
        return math.copysign(math.inf, tangent)
    return 1.0 / tangent


def _pow(base: float, exponent: float) -> float:
    """Power with IEEE results instead of Python exceptions."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": _finite_only(math.sin),
    "cos": _finite_only(math.cos),
    "tan": _tan,
    "tg": _tan,
    "ctg": _cot,
    "ctan": _cot,
    "log": _logarithm(math.log),
    "ln": _logarithm(math.log),
    "lg": _logarithm(math.log10),
    "sqrt": _sqrt,
    "abs": math.fabs,
}

CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}


class SimpleParser:
    """Parses an expression text and evaluates it for given values of ``x``."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self._pos = 0
        self._x = 0.0

    def evaluate(self, x: float) -> float:
        """Evaluate the expression at ``x``; raise ParseError on bad input."""
        self._x = float(x)
        self._pos = 0
        result = self._parse_expression()
        if self._pos < len(self.expression):
            raise ParseError("Unexpected characters at end of expression")
        return result

    def _parse_expression(self) -> float:
        left = self._parse_term()
        while True:
            if self._match_char("+"):
                left += self._parse_term()
            elif self._match_char("-"):
                left -= self._parse_term()
            else:
                return left

    def _parse_term(self) -> float:
        left = self._parse_factor()
        while True:
            if self._match_char("*"):
                left *= self._parse_factor()
            elif self._match_char("/"):
                divisor = self._parse_factor()
                if divisor == 0.0:
                    raise ParseError("Division by zero")
                left /= divisor
            elif self._implicit_multiplication_pending():
                left *= self._parse_factor()
            else:
                return left

    def _parse_factor(self) -> float:
        negative = False
        if self._match_char("-"):
            negative = True
        else:
            self._match_char("+")

        result = self._parse_primary()
        if self._match_char("^"):
            result = _pow(result, self._parse_factor())
        return -result if negative else result

    def _parse_primary(self) -> float:
        if self._match_char("("):
            result = self._parse_expression()
            if not self._match_char(")"):
                raise ParseError("Missing closing parenthesis")
            return result

        for name, func in FUNCTIONS.items():
            if self._match_word(name):
                if not self._match_char("("):
                    raise ParseError("Expected '(' after function")
                argument = self._parse_expression()
                if not self._match_char(")"):
                    raise ParseError("Missing closing parenthesis")
                return func(argument)

        for name, value in CONSTANTS.items():
            if self._match_word(name):
                return value

        if self._match_char("x"):
            return self._x
        if self._peek() in _DIGITS:
            return self._parse_number()

        raise ParseError("Unexpected character")

    def _implicit_multiplication_pending(self) -> bool:
        self._skip_whitespace()
        if self._pos >= len(self.expression):
            return False

        prev = self.expression[self._pos - 1] if self._pos > 0 else ""
        nxt = self._peek()
        starts_function = self._is_function_start()

        if prev in _DIGITS:
            return nxt == "x" or nxt == "(" or starts_function
        if prev == "x":
            return nxt in _DIGITS or nxt == "(" or starts_function
        if prev == ")":
            return nxt in _DIGITS or nxt == "x" or nxt == "(" or starts_function
        return False

    def _is_function_start(self) -> bool:
        return any(self.expression.startswith(name, self._pos) for name in _FUNCTION_STARTS)

    def _parse_number(self) -> float:
        self._skip_whitespace()
        start = self._pos
        has_decimal = False
        text = self.expression
        while self._pos < len(text):
            char = text[self._pos]
            if char in _DIGITS:
                self._pos += 1
            elif char == "." and not has_decimal:
                has_decimal = True
                self._pos += 1
            else:
                break
        try:
            return float(text[start:self._pos])
        except ValueError:
            raise ParseError("Invalid number format") from None

    def _peek(self) -> str:
        return self.expression[self._pos] if self._pos < len(self.expression) else ""

    def _match_char(self, expected: str) -> bool:
        self._skip_whitespace()
        if self._peek() == expected:
            self._pos += 1
            return True
        return False

    def _match_word(self, expected: str) -> bool:
        self._skip_whitespace()
        if self.expression.startswith(expected, self._pos):
            self._pos += len(expected)
            return True
        return False

    def _skip_whitespace(self) -> None:
        text = self.expression
        while self._pos < len(text) and text[self._pos] in _SPACES:
            self._pos += 1


def evaluate(expression: str, x: float) -> float:
    """Evaluate ``expression`` once at ``x``."""
    return SimpleParser(expression).evaluate(x)