"""
Arithmetic expression evaluation.

Grammar, lowest to highest precedence:

    expression := term (('+' | '-') term)*
    term       := power (('*' | '/') power)*
    power      := unary ('^' power)?
    unary      := ('-' | '+') unary | primary
    primary    := NUMBER | '(' expression ')'

'^' is right-associative; unary minus binds tighter than '^', so -2^2 is 4.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..exceptions import ExpressionSyntaxError

logger = logging.getLogger(__name__)

# Result returned for malformed input; test with math.isnan() or `x != x`
NAN = math.nan

NUMBER_PATTERN = re.compile(r'(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)
OPERATORS = frozenset('+-*/^()')


@dataclass
class Token:
    """Single lexical token."""
    kind: str  # 'number', 'op' or 'end'
    text: str
    position: int
    value: float = 0.0


def tokenize(expression: str) -> List[Token]:
    """
    Split an expression into tokens.

    Args:
        expression: Arithmetic expression

    Returns:
        Tokens, always terminated by an 'end' token

    Raises:
        ExpressionSyntaxError: On characters outside the grammar
    """
    tokens: List[Token] = []
    i = 0
    while i < len(expression):
        ch = expression[i]
        if ch.isspace():
            i += 1
            continue
        if ch in OPERATORS:
            tokens.append(Token('op', ch, i))
            i += 1
            continue
        match = NUMBER_PATTERN.match(expression, i)
        if match:
            tokens.append(Token('number', match.group(0), i, float(match.group(0))))
            i = match.end()
            continue
        raise ExpressionSyntaxError(f"Unexpected character {ch!r}", expression, i)

    tokens.append(Token('end', '', len(expression)))
    return tokens


def _divide(left: float, right: float) -> float:
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return NAN
        sign = math.copysign(1.0, left) * math.copysign(1.0, right)
        return math.copysign(math.inf, sign)
    return left / right


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and exponent == int(exponent) and int(exponent) % 2:
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0 and exponent < 0:
            # pow(+-0, negative): infinity, keeping the sign of zero for odd integer exponents
            if exponent == int(exponent) and int(exponent) % 2:
                return math.copysign(math.inf, base)
            return math.inf
        # Negative base with a fractional exponent
        return NAN


class ExpressionEvaluator:
    """
    Recursive-descent evaluator with one token of lookahead.

    evaluate() is total: malformed input yields NAN instead of raising.
    evaluate_strict() raises ExpressionSyntaxError with the reason.
    """

    def __init__(self):
        """Initialize the evaluator."""
        self._tokens: List[Token] = []
        self._pos = 0
        self._expression = ''

    def evaluate(self, expression: str) -> float:
        """
        Evaluate an expression.

        Args:
            expression: Arithmetic expression such as "(2+3)*4"

        Returns:
            The value, or NAN when the expression is malformed
        """
        try:
            return self.evaluate_strict(expression)
        except ExpressionSyntaxError as e:
            logger.debug(f"Malformed expression {expression!r}: {e}")
            return NAN
        except RecursionError:
            logger.debug(f"Expression nested too deeply: {expression[:40]!r}")
            return NAN

    def evaluate_safe(self, expression: str) -> Tuple[bool, float, Optional[str]]:
        """
        Evaluate an expression, returning success status and error message.

        Args:
            expression: Arithmetic expression

        Returns:
            (success, value, error_message) tuple
        """
        try:
            return True, self.evaluate_strict(expression), None
        except ExpressionSyntaxError as e:
            return False, NAN, str(e)
        except RecursionError:
            return False, NAN, "Expression nested too deeply"

    def evaluate_strict(self, expression: str) -> float:
        """
        Evaluate an expression, raising on malformed input.

        Raises:
            ExpressionSyntaxError: On any syntax error
        """
        self._expression = expression
        self._tokens = tokenize(expression)
        self._pos = 0

        value = self._parse_expression()
        token = self._peek()
        if token.kind != 'end':
            self._fail(f"Unexpected {token.text!r}", token)
        return value

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        if token.kind != 'end':
            self._pos += 1
        return token

    def _accept(self, op: str) -> bool:
        token = self._peek()
        if token.kind == 'op' and token.text == op:
            self._pos += 1
            return True
        return False

    def _fail(self, message: str, token: Token):
        raise ExpressionSyntaxError(message, self._expression, token.position)

    def _parse_expression(self) -> float:
        value = self._parse_term()
        while True:
            if self._accept('+'):
                value = value + self._parse_term()
            elif self._accept('-'):
                value = value - self._parse_term()
            else:
                return value

    def _parse_term(self) -> float:
        value = self._parse_power()
        while True:
            if self._accept('*'):
                value = value * self._parse_power()
            elif self._accept('/'):
                value = _divide(value, self._parse_power())
            else:
                return value

    def _parse_power(self) -> float:
        base = self._parse_unary()
        if self._accept('^'):
            return _power(base, self._parse_power())
        return base

    def _parse_unary(self) -> float:
        if self._accept('-'):
            return -self._parse_unary()
        if self._accept('+'):
            return self._parse_unary()
        return self._parse_primary()

    def _parse_primary(self) -> float:
        token = self._peek()
        if token.kind == 'number':
            self._advance()
            return token.value
        if self._accept('('):
            value = self._parse_expression()
            if not self._accept(')'):
                self._fail("Expected ')'", self._peek())
            return value
        if token.kind == 'end':
            self._fail("Unexpected end of expression", token)
        self._fail(f"Unexpected {token.text!r}", token)
        return NAN


def evaluate(expression: str) -> float:
    """Evaluate an arithmetic expression, returning NAN on malformed input."""
    return ExpressionEvaluator().evaluate(expression)


def is_nan(value: float) -> bool:
    """True for the malformed-expression sentinel."""
    return value != value
