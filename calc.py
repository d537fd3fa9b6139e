#!/usr/bin/python3
# Simples launcher para calcular uma expressão pela linha de comando.
import sys

from infixcalc.cli import main

if __name__ == "__main__":
    sys.exit(main())
