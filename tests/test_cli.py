import json
import logging

import pytest

from infixcalc.cli import main, flag_enabled, EXIT_OK, EXIT_ERROR, EXIT_USAGE
from infixcalc.config import Config
from infixcalc.parser import CommandRequest

@pytest.fixture
def configfile(tmp_path):
    def write(values):
        path = tmp_path / 'calc.json'
        path.write_text(json.dumps(values), encoding='utf-8')
        return str(path)

    return write

def test_command_request_flags():
    r = CommandRequest('calc').add_arguments(['--tokens', '--config=a=b.json', '-v', '2', '-1', '--', '-(3)'])

    assert r.flags == {'tokens': True, 'config': 'a=b.json', 'v': True}
    assert r.args == ['2', '-1', '--', '-(3)']

def test_result(capsys):
    assert main(['2', '+', '3', '*', '4']) == EXIT_OK
    assert capsys.readouterr().out == '14\n'

def test_negative_looking_argument_stays_in_expression(capsys):
    assert main(['2', '-1']) == EXIT_OK
    assert capsys.readouterr().out == '1\n'

def test_tokens_and_postfix(capsys):
    assert main(['--tokens', '--postfix', '2-1 + 2 * (2 + 3)']) == EXIT_OK
    assert capsys.readouterr().out == '2 - 1 + 2 * ( 2 + 3 )\n2 1 - 2 2 3 + * +\n11\n'

def test_calculator_error(capsys):
    assert main(['5 / 0']) == EXIT_ERROR

    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'ERROR: DivisionByZeroError: ' in captured.err

def test_usage(capsys):
    assert main([]) == EXIT_USAGE
    assert 'Uso:' in capsys.readouterr().err

def test_config_output_defaults(capsys, configfile):
    path = configfile({'logging': {'enable': False}, 'output': {'postfix': True}})

    assert main([f'--config={path}', '1+2']) == EXIT_OK
    assert capsys.readouterr().out == '1 2 +\n3\n'

def test_missing_config(capsys, tmp_path):
    assert main([f'--config={tmp_path / "nope.json"}', '1']) == EXIT_ERROR
    assert 'FileNotFoundError' in capsys.readouterr().err

def test_config_flag_without_value(capsys):
    assert main(['--config', '1']) == EXIT_ERROR
    assert 'ValueError' in capsys.readouterr().err

def test_config_get(configfile):
    c = Config(configfile({'logging': {'level': 'debug', 'file': None}, 'output': True}))

    assert c.get('logging.level') == 'debug'
    assert c.get('logging.file', 'x.log') is None
    assert c.get('logging.missing', 1) == 1
    assert c.get('output.tokens', False) is False
    assert c.get_loglevel() == logging.DEBUG

def test_config_unknown_loglevel(configfile):
    c = Config(configfile({'logging': {'level': 'loud'}}))

    assert c.get_loglevel(logging.INFO) == logging.INFO

@pytest.mark.parametrize('value, expected', [
    (True, True),
    (False, False),
    ('yes', True),
    ('TRUE', True),
    ('1', True),
    ('no', False),
    ('0', False),
    ('false', False),
])
def test_flag_enabled(value, expected):
    assert flag_enabled(value) is expected

def test_flag_with_false_value(capsys):
    assert main(['--tokens=no', '--postfix=yes', '12+3']) == EXIT_OK
    assert capsys.readouterr().out == '12 3 +\n15\n'
