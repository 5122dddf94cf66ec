"""RPN表达式求值器 - 下推自动机：数字入栈，操作符弹出两个数计算后入栈"""
import io
import sys
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import numpy as np

from core.token_system import Tokenizer, TokenType
from core.operators import Operators
from core.errors import RPNError, InvalidInput, NumericConversionFailure
from utils.display import format_number, format_stack

logger = logging.getLogger(__name__)


class EvaluatorState(Enum):
    AWAITING_LEXEME = "awaiting_lexeme"
    HAVE_NUMBER = "have_number"
    HAVE_OPERATOR = "have_operator"
    DONE = "done"


@dataclass
class EvaluationResult:
    """求值结果：成功时value有值，失败时error有值；leftover为最终弹出后栈中剩余的数"""
    value: Optional[float] = None
    error: Optional[RPNError] = None
    leftover: List[float] = field(default_factory=list)

    @property
    def ok(self):
        return self.error is None


class RPNEvaluator:
    """评估后缀表达式的值"""

    def __init__(self, verbose=False, out=None, terminator=None):
        self.verbose = verbose
        self.out = out
        self.terminator = terminator
        self.stack = []
        self.state = EvaluatorState.AWAITING_LEXEME

    def _trace(self, text):
        """verbose模式下输出中间步骤，不影响求值"""
        if self.verbose:
            out = self.out if self.out is not None else sys.stdout
            out.write(text)

    def _set_state(self, state):
        logger.debug(f"State: {self.state.name} -> {state.name}")
        self.state = state

    def _pop(self):
        if not self.stack:
            raise InvalidInput()
        return self.stack.pop()

    def _push_number(self, lexeme):
        try:
            n = np.float64(float(lexeme.text))
        except ValueError as e:
            raise NumericConversionFailure(lexeme.text) from e
        self._trace(f"Number {format_number(n)}\n")
        self.stack.append(n)

    def _apply_operator(self, lexeme):
        op = lexeme.symbol
        self._trace(f"Operator {op}\nStack: {format_stack(self.stack)}")

        # 栈顶是第二个操作数，下面的才是第一个操作数
        n2 = self._pop()
        n1 = self._pop()
        if op == '/' and n2 == 0.0:
            self._trace("\n")
        res = Operators.apply(op, n1, n2)

        self._trace(f"\n{format_number(n1)} {op} {format_number(n2)} = {format_number(res)}\n")
        self.stack.append(res)
        self._trace(f"Stack: {format_stack(self.stack)}\n\n")

    def run(self, stream):
        """
        读取整个输入并求值
        Returns:
            (value, leftover): 最终结果，以及弹出结果后栈中剩下的数（从底到顶）
        Raises:
            RPNError的各个子类，在检测到的位置直接抛出
        """
        self.stack = []
        self.state = EvaluatorState.AWAITING_LEXEME
        tokenizer = Tokenizer(stream, terminator=self.terminator)

        end_of_input = False
        while not end_of_input:
            lexeme, end_of_input = tokenizer.next_token()
            # 输入结束时附带的最后一个Token也要处理
            if lexeme is None:
                continue

            if lexeme.type == TokenType.NUMBER:
                self._set_state(EvaluatorState.HAVE_NUMBER)
                self._push_number(lexeme)
            else:
                self._set_state(EvaluatorState.HAVE_OPERATOR)
                self._apply_operator(lexeme)

            if not end_of_input:
                self._set_state(EvaluatorState.AWAITING_LEXEME)

        self._set_state(EvaluatorState.DONE)

        # 对于正确完整的表达式，弹出结果后栈应为空
        if not self.stack:
            raise InvalidInput("empty expression")
        value = self.stack.pop()
        leftover = list(self.stack)
        if leftover:
            logger.debug(f"Stack not empty after final pop: {leftover}")
        return value, leftover

    def evaluate(self, stream):
        """求值并把错误收进EvaluationResult，而不是抛出"""
        try:
            value, leftover = self.run(stream)
        except RPNError as e:
            logger.debug(f"Evaluation failed: {type(e).__name__}: {e}")
            return EvaluationResult(error=e)
        return EvaluationResult(value=value, leftover=leftover)


def evaluate_expression(text, **kwargs):
    """对字符串形式的表达式求值"""
    return RPNEvaluator(**kwargs).evaluate(io.StringIO(text))
