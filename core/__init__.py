"""核心模块 - Token系统、RPN评估器和操作符"""
from .errors import (
    RPNError, InvalidLexeme, InvalidInput, DivisionByZero,
    NumericConversionFailure, StreamFailure
)
from .token_system import (
    TokenType, Number, Operator, OPERATOR_SYMBOLS, Tokenizer, tokenize
)
from .operators import Operators, OPERATOR_METHODS
from .rpn_evaluator import (
    RPNEvaluator, EvaluationResult, EvaluatorState, evaluate_expression
)

__all__ = [
    'RPNError', 'InvalidLexeme', 'InvalidInput', 'DivisionByZero',
    'NumericConversionFailure', 'StreamFailure',
    'TokenType', 'Number', 'Operator', 'OPERATOR_SYMBOLS', 'Tokenizer', 'tokenize',
    'Operators', 'OPERATOR_METHODS',
    'RPNEvaluator', 'EvaluationResult', 'EvaluatorState', 'evaluate_expression'
]
