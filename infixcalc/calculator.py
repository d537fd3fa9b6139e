import sys
import logging

from infixcalc.errors import CalculatorError
from infixcalc.parser import Tokenizer
from infixcalc.converter import to_postfix
from infixcalc.evaluator import evaluate
from infixcalc.tokens import tokens_string

class Calculator:
    """Tokeniza e converte a expressão no construtor, avalia sob demanda."""

    def __init__(self, expression: str=''):
        self.tokenizer = Tokenizer('')
        self.feed(expression)

    def feed(self, expression: str):
        self.tokenizer.feed(expression)
        tokens = self.tokenizer.parse()

        try:
            postfix = to_postfix(tokens)
        except CalculatorError as e:
            self.log_error(e, expression)
            raise e

        # Só troca o estado depois da conversão, um feed com erro mantém a expressão anterior.
        self.expression = expression
        self.tokens = tokens
        self.postfix = postfix

    def calculate(self):
        try:
            return evaluate(self.postfix)
        except CalculatorError as e:
            self.log_error(e, self.expression)
            raise e

    def log_error(self, e, expression):
        position = e.position()

        if position is None:
            logging.error(f'{expression}: {e}')
        else:
            logging.error(f"\n{expression}: {e}\n{position * ' '}^")

    def tokens_string(self):
        return tokens_string(self.tokens)

    def postfix_string(self):
        return tokens_string(self.postfix)

    def show(self, file=None):
        file = file or sys.stdout
        file.write(f'{self.tokens_string()}\n')
