from enum import Enum

class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    PAR_START = '('
    PAR_END = ')'

    def __str__(self):
        return self.value

    def is_grouping(self):
        return self in (Operator.PAR_START, Operator.PAR_END)

    @staticmethod
    def from_text(text):
        try:
            return Operator(text)
        except ValueError:
            return None

EXPR_OPERATORS = tuple(op.value for op in Operator)

# Precedência do operador quando ele já está na pilha.
# PAR_END nunca é empilhado, por isso não aparece aqui.
IN_PRECEDENCE_MAP = {
    Operator.ADD: 2,
    Operator.SUB: 2,
    Operator.MUL: 4,
    Operator.DIV: 4,
    Operator.PAR_START: 0
}

# Precedência do operador que está prestes a ser empilhado.
OUT_PRECEDENCE_MAP = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 3,
    Operator.DIV: 3,
    Operator.PAR_START: 5,
    Operator.PAR_END: 0
}

def in_precedence(op: Operator):
    return IN_PRECEDENCE_MAP[op]

def out_precedence(op: Operator):
    return OUT_PRECEDENCE_MAP[op]

class Token:
    """Um inteiro literal (mantido como texto) ou um operador.

    A classificação acontece uma única vez, na construção. Texto malformado
    continua sendo um inteiro literal, quem reclama disso é o avaliador.
    """

    __slots__ = ('text', 'operator', 'position')

    def __init__(self, text: str, position: int=None):
        object.__setattr__(self, 'text', text)
        object.__setattr__(self, 'operator', Operator.from_text(text))
        object.__setattr__(self, 'position', position)

    def __setattr__(self, name, value):
        raise AttributeError(f'Token is immutable, cannot set {name}')

    def __delattr__(self, name):
        raise AttributeError(f'Token is immutable, cannot delete {name}')

    def is_operator(self):
        return self.operator is not None

    def is_value(self):
        return not self.is_operator()

    def __eq__(self, other):
        if isinstance(other, Token):
            return self.text == other.text
        return NotImplemented

    def __hash__(self):
        return hash(self.text)

    def describe(self):
        if self.position is None:
            return f'`{self.text}`'
        return f'`{self.text}` (posição {self.position})'

    def __str__(self):
        return self.text

    def __repr__(self):
        if self.position is None:
            return f'Token({self.text!r})'
        return f'Token({self.text!r}, position={self.position})'

def tokens_string(tokens):
    return ' '.join(str(t) for t in tokens)
