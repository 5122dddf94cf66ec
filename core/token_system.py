"""core/token_system.py"""
import logging
from dataclasses import dataclass
from enum import Enum

from config.config import TOKENIZER_CONFIG
from core.errors import InvalidLexeme, StreamFailure

logger = logging.getLogger(__name__)

OPERATOR_SYMBOLS = ('+', '-', '*', '/')
SIGNS = ('+', '-')
ASCII_DIGITS = frozenset('0123456789')
ASCII_WHITESPACE = frozenset(' \t\n\r\v\f')
ZERO = '0'


class TokenType(Enum):
    NUMBER = "number"  # 数字（保留原始文本）
    OPERATOR = "operator"  # + - * /


@dataclass(frozen=True)
class Number:
    text: str

    @property
    def type(self):
        return TokenType.NUMBER


@dataclass(frozen=True)
class Operator:
    symbol: str

    @property
    def type(self):
        return TokenType.OPERATOR


class Tokenizer:
    """
    逐字符读取输入流，产生数字或操作符Token
    只有一个字符的回退缓冲区；不依赖底层流的回退能力
    """

    def __init__(self, stream, terminator=None, unicode_classes=None):
        self.stream = stream
        self.terminator = terminator or TOKENIZER_CONFIG['terminator']
        self.radix_point = TOKENIZER_CONFIG['radix_point']
        if unicode_classes is None:
            unicode_classes = TOKENIZER_CONFIG['unicode_classes']
        self.unicode_classes = unicode_classes
        self._pushback = None

    def is_digit(self, c):
        if self.unicode_classes:
            return c.isdigit()
        return c in ASCII_DIGITS

    def is_space(self, c):
        if self.unicode_classes:
            return c.isspace()
        return c in ASCII_WHITESPACE

    def _read(self):
        """读一个字符；流结束时返回''"""
        if self._pushback is not None:
            c, self._pushback = self._pushback, None
            return c
        try:
            return self.stream.read(1)
        except (OSError, UnicodeDecodeError) as e:
            raise StreamFailure() from e

    def _unread(self, c):
        if self._pushback is not None:
            raise RuntimeError("pushback buffer already holds a character")
        self._pushback = c

    def next_token(self):
        """
        读取下一个Token
        Returns:
            (lexeme, end_of_input): lexeme 为 Number/Operator，流结束且没有读到内容时为 None
        Raises:
            InvalidLexeme: 未到输入结束，且文本既不是合法数字也不是操作符
            StreamFailure: 读取失败
        """
        text = ''
        got_radix_point = False
        is_valid_num = False
        end_of_input = False

        while True:
            c = self._read()
            if c == '':
                end_of_input = True
                break

            if c == self.terminator:
                end_of_input = True
                break

            if c in SIGNS:
                # 符号只能出现在开头，否则属于下一个Token
                if text:
                    self._unread(c)
                    break
                text += c
                continue

            if c == self.radix_point:
                if got_radix_point:
                    self._unread(c)
                    break
                if not text:
                    text += ZERO  # .5 -> 0.5
                text += c
                got_radix_point = True
                is_valid_num = False  # 不能以小数点结尾
                continue

            if c in ('*', '/'):
                if text:
                    self._unread(c)
                else:
                    text += c
                break

            if self.is_space(c):
                if not text:
                    continue
                self._unread(c)  # 空白是分隔符
                break

            if not self.is_digit(c):
                # 非法字符：保存下来给用户看
                text += c
                self._unread(c)
                is_valid_num = False
                break

            text += c
            is_valid_num = True

        is_operator = text in OPERATOR_SYMBOLS
        if not end_of_input and not is_valid_num and not is_operator:
            raise InvalidLexeme(text)

        if is_operator:
            lexeme = Operator(text)
        elif text:
            lexeme = Number(text)
        else:
            lexeme = None

        logger.debug(f"Lexeme: {lexeme!r}, end_of_input={end_of_input}")
        return lexeme, end_of_input


def tokenize(stream, terminator=None):
    """依次产生Token直到输入结束"""
    tokenizer = Tokenizer(stream, terminator=terminator)
    end_of_input = False
    while not end_of_input:
        lexeme, end_of_input = tokenizer.next_token()
        if lexeme is not None:
            yield lexeme
