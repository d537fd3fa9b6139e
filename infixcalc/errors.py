# Errors module

# Classe base, todos os erros da calculadora derivam dela.
class CalculatorError(Exception):
    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token

    def position(self):
        return self.token.position if self.token is not None else None

# Utilizado quando um token que deveria ser numérico não é um inteiro válido.
class MalformedOperandError(CalculatorError):
    pass

# Utilizado no momento da divisão, quando o operando da direita é zero.
class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    pass

# Utilizado quando um operador não possui operandos suficientes, ou um `)` não possui `(` correspondente.
class StackUnderflowError(CalculatorError):
    pass
