import pytest

from core.errors import FormatError
from core.token_system import ExpressionScanner, TokenType, TOKEN_DEFINITIONS
from core.operators import Operators


def test_scan_splits_numbers_and_operators():
    numbers, operators = ExpressionScanner.scan("12+3.5*4")
    assert numbers == [12.0, 3.5, 4.0]
    assert operators == ['+', '*']


def test_scan_fuses_unary_minus():
    numbers, operators = ExpressionScanner.scan("-1--2*-3")
    assert numbers == [-1.0, -2.0, -3.0]
    assert operators == ['-', '*']


def test_scan_single_number():
    assert ExpressionScanner.scan(" 42 ") == ([42.0], [])


@pytest.mark.parametrize(
    "expression, message",
    [
        ("", "Input string cannot be empty or null."),
        ("2&3", "Invalid operator at position 1"),
        ("2+&3", "Invalid number at position 2"),
        ("1.2.3", "Invalid number at position 0"),
        ("4 + 5 +", "Invalid expression format"),
        ("2 * x", "Invalid number at position 2"),
    ],
)
def test_scan_error_messages(expression, message):
    with pytest.raises(FormatError) as excinfo:
        ExpressionScanner.scan(expression)
    assert str(excinfo.value) == message


def test_non_ascii_digits_are_rejected():
    with pytest.raises(FormatError):
        ExpressionScanner.scan("١+1")


def test_is_operator():
    assert all(ExpressionScanner.is_operator(c) for c in "+-*/")
    assert not ExpressionScanner.is_operator("%")
    assert not ExpressionScanner.is_operator(".")


def test_tokenize_positions():
    tokens = ExpressionScanner.tokenize("1 + -2*3")
    assert [t.type for t in tokens] == [
        TokenType.NUMBER, TokenType.OPERATOR, TokenType.NUMBER, TokenType.OPERATOR, TokenType.NUMBER
    ]
    assert [t.position for t in tokens] == [0, 1, 2, 4, 5]
    assert tokens[2].value == -2.0
    assert tokens[3].name == 'multiply'
    assert tokens[3].precedence == 2
    assert tokens[1].precedence == 1


def test_token_definitions_map_to_operator_methods():
    for symbol, token in TOKEN_DEFINITIONS.items():
        assert token.symbol == symbol
        assert callable(getattr(Operators, token.name))
