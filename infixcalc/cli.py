import sys
import logging

from infixcalc.calculator import Calculator
from infixcalc.config import Config
from infixcalc.errors import CalculatorError
from infixcalc.parser import CommandRequest

CALC_ENABLE_LOGGING = True
CALC_LOGFILE        = None
CALC_LOGLEVEL       = logging.WARNING

EXIT_OK    = 0
EXIT_ERROR = 1
EXIT_USAGE = 2

def show_usage(prog='calc'):
    sys.stderr.write(f'Uso:\n\n{prog} [--tokens] [--postfix] [--verbose] [--config=arquivo.json] <expressao...>\n')

def flag_enabled(value):
    # `--flag` chega como True, `--flag=valor` chega como texto.
    if isinstance(value, str):
        return value.lower() in ('1', 'yes', 'enabled', 'true')

    return bool(value)

def load_config(path):
    if not isinstance(path, str):
        raise ValueError('--config precisa de um arquivo, Ex: --config=calc.json')

    return Config(path)

def setup_logging(config, verbose):
    enable = CALC_ENABLE_LOGGING
    logfile = CALC_LOGFILE
    loglevel = CALC_LOGLEVEL

    if config:
        enable = config.get('logging.enable', enable)
        logfile = config.get('logging.file', logfile)
        loglevel = config.get_loglevel(loglevel)

    if verbose:
        enable = True
        loglevel = logging.DEBUG

    # Log básico, não queremos nada "fancy"
    if enable:
        logging.basicConfig(
            filename=logfile,
            format="[%(asctime)s] <%(levelname)s> %(message)s",
            datefmt="%d/%m/%Y %H:%M:%S",
            level=loglevel
        )

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    request = CommandRequest('calc').add_arguments(argv)
    flags = request.flags

    config = None
    if 'config' in flags:
        try:
            config = load_config(flags['config'])
        except (OSError, ValueError) as e:
            sys.stderr.write(f'ERROR: {type(e).__name__}: {e}\n')
            return EXIT_ERROR

    setup_logging(config, flag_enabled(flags.get('verbose', False)) or flag_enabled(flags.get('v', False)))

    if not request.args:
        show_usage(request.cmd)
        return EXIT_USAGE

    show_tokens = flag_enabled(flags.get('tokens', config.get('output.tokens', False) if config else False))
    show_postfix = flag_enabled(flags.get('postfix', config.get('output.postfix', False) if config else False))

    expression = ' '.join(request.args)
    logging.info(f'Calculating expression: {expression}')

    try:
        c = Calculator(expression)

        if show_tokens:
            c.show()
        if show_postfix:
            sys.stdout.write(f'{c.postfix_string()}\n')

        result = c.calculate()
    except CalculatorError as e:
        sys.stderr.write(f'ERROR: {type(e).__name__}: {e}\n')
        return EXIT_ERROR

    sys.stdout.write(f'{result}\n')
    return EXIT_OK
