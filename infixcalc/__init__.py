from infixcalc.errors import CalculatorError, MalformedOperandError, DivisionByZeroError, StackUnderflowError
from infixcalc.tokens import Operator, Token, in_precedence, out_precedence
from infixcalc.parser import Parser, Tokenizer, tokenize
from infixcalc.converter import to_postfix
from infixcalc.evaluator import evaluate
from infixcalc.calculator import Calculator

__all__ = [
    'CalculatorError', 'MalformedOperandError', 'DivisionByZeroError', 'StackUnderflowError',
    'Operator', 'Token', 'in_precedence', 'out_precedence',
    'Parser', 'Tokenizer', 'tokenize',
    'to_postfix', 'evaluate', 'Calculator'
]
