import re
import logging

from infixcalc.errors import MalformedOperandError, DivisionByZeroError, StackUnderflowError
from infixcalc.tokens import Operator

# Inteiro base 10 com sinal opcional, sem espaços ou `_` (que o int() aceitaria).
INTEGER_LITERAL = re.compile(r'[+-]?[0-9]+')

def truncating_division(b: int, a: int):
    # Divisão inteira arredondando para zero, `//` arredonda para baixo.
    q = abs(b) // abs(a)
    return q if (b < 0) == (a < 0) else -q

def apply_operator(token, b: int, a: int):
    op = token.operator

    if op.is_grouping():
        # Um `(` que sobrou da conversão, os parenteses não estavam balanceados.
        raise MalformedOperandError(f'{token.describe()} não é um operador aritmético, verifique os parenteses.', token)
    elif op is Operator.ADD:
        return b + a
    elif op is Operator.SUB:
        return b - a
    elif op is Operator.MUL:
        return b * a
    else:
        if a == 0:
            raise DivisionByZeroError(f'Divisão por zero em {token.describe()}: {b} / 0.', token)
        return truncating_division(b, a)

def parse_operand(token):
    if not INTEGER_LITERAL.fullmatch(token.text):
        raise MalformedOperandError(f'{token.describe()} não é um número inteiro válido.', token)

    return int(token.text)

def evaluate(postfix):
    """Avalia uma sequência pós-fixa e retorna um único inteiro.

    Para cada operador, o primeiro valor desempilhado é o operando da direita
    e o segundo o da esquerda, então `b OP a` respeita a ordem original.
    """
    # Pilha de operandos
    stack = []

    for token in postfix:
        if token.is_operator():
            if len(stack) < 2:
                raise StackUnderflowError(f'{token.describe()} precisa de dois operandos, mas a pilha possui {len(stack)}.', token)

            a = stack.pop()
            b = stack.pop()

            stack.append(apply_operator(token, b, a))
        else:
            stack.append(parse_operand(token))

    if not stack:
        raise StackUnderflowError('Nenhum valor restou na pilha após a avaliação.')
    elif len(stack) > 1:
        logging.warning(f'Stack has {len(stack)} values after evaluation, returning the top one')

    logging.debug(f'Evaluated postfix to {stack[-1]}')

    return stack[-1]
