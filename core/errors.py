"""core/errors.py - 求值过程中的错误类型"""


class RPNError(Exception):
    """所有表达式/输入错误的基类"""


class InvalidLexeme(RPNError):
    """Token既不是合法数字也不是操作符"""

    def __init__(self, text):
        super().__init__(f"Invalid expression: {text}")
        self.text = text


class InvalidInput(RPNError):
    """需要操作数时栈为空（栈下溢或没有最终结果）"""

    def __init__(self, context=""):
        message = "Invalid input"
        if context:
            message += f": {context}"
        super().__init__(message)
        self.context = context


class DivisionByZero(RPNError):
    """除数为0；携带被除数"""

    def __init__(self, dividend):
        super().__init__(f"Division by zero: {dividend} / 0")
        self.dividend = dividend


class NumericConversionFailure(RPNError):

    def __init__(self, text):
        super().__init__("Could not convert to number")
        self.text = text


class StreamFailure(RPNError):
    """输入流出错（不是正常的流结束）"""

    def __init__(self):
        super().__init__("Input stream failure")
