"""
Tests for the character-at-a-time tokenizer.

Validates that:
1. Signs bind to numbers only as the first character of a lexeme
2. Radix points get a leading zero and a second one starts a new lexeme
3. '*' and '/' are always standalone operators
4. Invalid characters are reported with the accumulated text
5. End of input is returned as a flag, not a lexeme
"""

import io

import pytest

from core import (
    Tokenizer, tokenize, Number, Operator, TokenType,
    InvalidLexeme, StreamFailure
)


def lexemes(text, **kwargs):
    return list(tokenize(io.StringIO(text), **kwargs))


class TestNumbers:
    """Number lexemes keep their raw text."""

    def test_leading_radix_point_gets_zero(self, make_tokenizer):
        assert make_tokenizer(".5;").next_token() == (Number("0.5"), True)

    def test_signed_numbers(self):
        assert lexemes("+5 -3.25;") == [Number("+5"), Number("-3.25")]

    def test_negative_fraction_keeps_sign(self):
        assert lexemes("-.5;") == [Number("-.5")]

    def test_second_radix_point_starts_next_lexeme(self):
        assert lexemes("1.2.3;") == [Number("1.2"), Number("0.3")]

    def test_trailing_radix_point_is_invalid_before_end(self, make_tokenizer):
        with pytest.raises(InvalidLexeme) as exc_info:
            make_tokenizer("5. 3;").next_token()
        assert exc_info.value.text == "5."

    def test_trailing_radix_point_at_end_is_passed_through(self, make_tokenizer):
        tokenizer = make_tokenizer("3 5.;")
        assert tokenizer.next_token() == (Number("3"), False)
        assert tokenizer.next_token() == (Number("5."), True)

    def test_number_type(self):
        assert Number("1").type == TokenType.NUMBER


class TestOperators:
    """Operators are single characters of + - * /."""

    def test_lone_minus_before_terminator_is_operator(self, make_tokenizer):
        assert make_tokenizer("-;").next_token() == (Operator("-"), True)

    def test_lone_plus_before_space_is_operator(self, make_tokenizer):
        assert make_tokenizer("+ ;").next_token() == (Operator("+"), False)

    def test_sign_after_text_is_pushed_back(self):
        assert lexemes("3-4;") == [Number("3"), Number("-4")]

    def test_consecutive_signs(self):
        assert lexemes("-+;") == [Operator("-"), Operator("+")]

    def test_multiply_and_divide_split_numbers(self):
        assert lexemes("3*4/2;") == [
            Number("3"), Operator("*"), Number("4"), Operator("/"), Number("2")
        ]

    def test_consecutive_operators_tokenize_fine(self):
        assert lexemes("+ - * /;") == [
            Operator("+"), Operator("-"), Operator("*"), Operator("/")
        ]

    def test_operator_type(self):
        assert Operator("*").type == TokenType.OPERATOR


class TestDelimiters:
    """Whitespace, terminator and end of stream."""

    def test_classic_expression(self):
        assert lexemes("3 4 +;") == [Number("3"), Number("4"), Operator("+")]

    def test_whitespace_variants(self):
        assert lexemes("\t3\n\n4   +\r\n;") == [Number("3"), Number("4"), Operator("+")]

    def test_text_after_terminator_is_not_read(self, make_tokenizer):
        stream = io.StringIO("7; 8")
        tokenizer = Tokenizer(stream)
        assert tokenizer.next_token() == (Number("7"), True)
        assert stream.read() == " 8"

    def test_end_of_stream_without_terminator(self, make_tokenizer):
        tokenizer = make_tokenizer("3 4")
        assert tokenizer.next_token() == (Number("3"), False)
        assert tokenizer.next_token() == (Number("4"), True)

    @pytest.mark.parametrize("text", ["", ";", "   ;", "\n"])
    def test_empty_input(self, make_tokenizer, text):
        assert make_tokenizer(text).next_token() == (None, True)

    def test_custom_terminator(self):
        assert lexemes("3 4 + # 9", terminator="#") == [
            Number("3"), Number("4"), Operator("+")
        ]


class TestInvalidLexemes:
    """Unknown characters fail classification with the offending text."""

    def test_invalid_character_alone(self, make_tokenizer):
        tokenizer = make_tokenizer("3 4 @ +;")
        tokenizer.next_token()
        tokenizer.next_token()
        with pytest.raises(InvalidLexeme) as exc_info:
            tokenizer.next_token()
        assert "@" in exc_info.value.text

    def test_invalid_character_after_digits(self, make_tokenizer):
        with pytest.raises(InvalidLexeme) as exc_info:
            make_tokenizer("3@;").next_token()
        assert exc_info.value.text == "3@"

    def test_non_ascii_digit_rejected_by_default(self, make_tokenizer):
        with pytest.raises(InvalidLexeme):
            make_tokenizer("٣;").next_token()

    def test_non_ascii_digit_accepted_with_unicode_classes(self, make_tokenizer):
        tokenizer = make_tokenizer("٣ 4;", unicode_classes=True)
        assert tokenizer.next_token() == (Number("٣"), False)
        assert tokenizer.next_token() == (Number("4"), True)


class TestStream:
    """Reading and the one-slot pushback buffer."""

    def test_read_failure_raises_stream_failure(self, broken_stream):
        tokenizer = Tokenizer(broken_stream("12"))
        with pytest.raises(StreamFailure) as exc_info:
            tokenizer.next_token()
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_decode_failure_raises_stream_failure(self, broken_stream):
        exc = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        with pytest.raises(StreamFailure):
            Tokenizer(broken_stream("", exc=exc)).next_token()

    def test_pushback_holds_one_character(self, make_tokenizer):
        tokenizer = make_tokenizer("")
        tokenizer._unread("a")
        with pytest.raises(RuntimeError):
            tokenizer._unread("b")
        assert tokenizer._read() == "a"
        assert tokenizer._read() == ""
