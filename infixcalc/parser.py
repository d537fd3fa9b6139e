import io
import logging

from infixcalc.tokens import Token, EXPR_OPERATORS

FLAG_LONG_PREFIX = '--'
FLAG_SHORT_PREFIX = '-'
FLAG_VALUE_SEPARATOR = '='

class CommandRequest:
    """Argumentos e flags de uma linha de comando.

    `--nome` e `--nome=valor` viram flags longas, `-x` vira flag curta, o
    resto (inclusive números negativos como `-1`) continua sendo argumento.
    """

    def __init__(self, cmd=''):
        self.cmd = cmd
        self.args = []
        self.flags = {}

    def add_argument(self, arg: str):
        # Não permite começar com números Ex: -1
        if arg.startswith(FLAG_LONG_PREFIX) and len(arg) > 2 and arg[2].isalpha():
            kv = arg[2:].split(FLAG_VALUE_SEPARATOR)

            if len(kv) > 1:
                self.flags[kv[0]] = FLAG_VALUE_SEPARATOR.join(kv[1:])
            else:
                self.flags[kv[0]] = True
        elif arg.startswith(FLAG_SHORT_PREFIX) and len(arg) > 1 and arg[1].isalpha():
            self.flags[arg[1:]] = True
        else:
            self.args.append(arg)

    def add_arguments(self, args):
        for arg in args:
            self.add_argument(arg)

        return self

class Parser:
    def __init__(self, inputstr):
        self.feed(inputstr)

    def feed(self, inputstr):
        self.inputstr = inputstr
        self.index = 0

    def at_end(self):
        return self.index >= len(self.inputstr)

    def seek(self, delta):
        self.index += delta

    def current_char(self):
        if self.index < 0 or self.index >= len(self.inputstr):
            return None

        return self.inputstr[self.index]

    def eat_current_char(self):
        c = self.current_char()
        self.index += 1
        return c

    def parse(self):
        raise NotImplementedError()

class Tokenizer(Parser):
    def parse(self):
        tokens = []

        while not self.at_end():
            c = self.current_char()

            if c.isspace():
                self.seek(1)
            elif c in EXPR_OPERATORS:
                tokens.append(Token(self.eat_current_char(), self.index - 1))
            else:
                start = self.index
                tokens.append(Token(self.eat_literal(), start))

        logging.debug(f'Tokenized {self.inputstr!r} into {len(tokens)} token(s)')

        return tokens

    def eat_literal(self):
        buffer = io.StringIO()

        c = self.current_char()
        while c and not c.isspace() and c not in EXPR_OPERATORS:
            buffer.write(c)
            self.seek(1)
            c = self.current_char()

        literal = buffer.getvalue()

        buffer.close()

        return literal

def tokenize(inputstr: str):
    return Tokenizer(inputstr).parse()
