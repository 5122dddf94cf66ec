"""core/operators.py"""
import numpy as np
import logging

from core.errors import DivisionByZero

logger = logging.getLogger(__name__)

OPERATOR_METHODS = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
}


class Operators:
    """二元操作符的静态方法集合；n1为左操作数，n2为右操作数"""

    @staticmethod
    def add(n1, n2):
        with np.errstate(all='ignore'):
            return np.float64(n1) + np.float64(n2)

    @staticmethod
    def sub(n1, n2):
        with np.errstate(all='ignore'):
            return np.float64(n1) - np.float64(n2)

    @staticmethod
    def mul(n1, n2):
        with np.errstate(all='ignore'):
            return np.float64(n1) * np.float64(n2)

    @staticmethod
    def div(n1, n2):
        """除法；除数为0（含-0.0）时抛出DivisionByZero，携带被除数"""
        if n2 == 0.0:
            raise DivisionByZero(n1)
        with np.errstate(all='ignore'):
            return np.float64(n1) / np.float64(n2)

    @staticmethod
    def apply(symbol, n1, n2):
        method_name = OPERATOR_METHODS.get(symbol)
        if method_name is None:
            raise ValueError(f"Unknown operator: {symbol}")
        result = getattr(Operators, method_name)(n1, n2)
        logger.debug(f"{n1} {symbol} {n2} = {result}")
        return result
