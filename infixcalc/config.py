import json
import logging

class Config:
    def __init__(self, configfile: str):
        self.kvalues = {}
        self.path = configfile
        # Já tenta abrir o arquivo no construtor, para não esquecermos o Config.load() depois de instanciar o objeto.
        self.load()

    def load(self):
        with open(self.path, 'r', encoding='utf-8') as f:
            self.kvalues = json.load(f)

        logging.debug(f'Loaded configuration file: {self.path}')

    def get(self, keystr: str, default=None):
        curr = self.kvalues

        try:
            for key in keystr.split('.'):
                curr = curr[key]
        except (KeyError, TypeError):
            return default

        return curr

    def get_loglevel(self, default=logging.WARNING):
        name = self.get('logging.level')

        if not name:
            return default

        level = logging.getLevelName(str(name).upper())
        if not isinstance(level, int):
            logging.warning(f'Unknown log level {name} in {self.path}, using {logging.getLevelName(default)}')
            return default

        return level
