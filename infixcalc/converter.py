import logging

from infixcalc.errors import StackUnderflowError
from infixcalc.tokens import Operator, in_precedence, out_precedence, tokens_string

def to_postfix(tokens):
    """Converte uma sequência de tokens infixa para a notação pós-fixa (shunting-yard).

    Cada operador possui duas precedências, uma para quando já está na pilha e
    outra para quando está prestes a entrar nela (ver IN_PRECEDENCE_MAP e
    OUT_PRECEDENCE_MAP). A lista recebida não é modificada.

    Um `)` sem `(` correspondente gera StackUnderflowError. Um `(` sem `)`
    não é detectado aqui, ele vai para a saída e o avaliador o rejeita.
    """
    postfix = []
    # Pilha de operadores
    stack = []

    for token in tokens:
        if token.is_value():
            postfix.append(token)
        elif token.operator is Operator.PAR_END:
            outp = out_precedence(token.operator)

            while stack and in_precedence(stack[-1].operator) > outp:
                postfix.append(stack.pop())

            if not stack:
                raise StackUnderflowError(f'{token.describe()} não possui `(` correspondente.', token)

            # Descarta o `(` correspondente
            stack.pop()
        else:
            outp = out_precedence(token.operator)

            while stack and in_precedence(stack[-1].operator) >= outp:
                postfix.append(stack.pop())

            stack.append(token)

    while stack:
        postfix.append(stack.pop())

    logging.debug(f'Converted to postfix: {tokens_string(postfix)}')

    return postfix
