"""Line-oriented console input and output for the menu program."""

from __future__ import annotations

import sys
from typing import TextIO

_LOGO = (
    r"$$$$$$$$\ $$\      $$\  $$$$$$\                        $$\                             ",
    r"$$  _____|$$$\    $$$ |$$  __$$\                       $$ |                            ",
    r"$$ |      $$$$\  $$$$ |$$ /  \__|$$\   $$\  $$$$$$$\ $$$$$$\    $$$$$$\  $$$$$$\$$\  ",
    r"$$$$$\    $$\$$\$$ $$ |\$$$$$$\  $$ |  $$ |$$  _____|\_$$  _|  $$  __$$\ $$  _$$  _$$\ ",
    r"$$  __|   $$ \$$$  $$ | \____$$\ $$ |  $$ |\$$$$$$\    $$ |    $$$$$$$$ |$$ / $$ / $$ |",
    r"$$ |      $$ |\$  /$$ |$$\   $$ |$$ |  $$ | \____$$\   $$ |$$\ $$   ____|$$ | $$ | $$ |",
    r"$$$$$$$$\ $$ | \_/ $$ |\$$$$$$  |\$$$$$$$ |$$$$$$$  |  \$$$$  |\$$$$$$$\ $$ | $$ | $$ |",
    r"\________|\__|     \__| \______/  \____$$ |\_______/    \____/  \_______|\__| \__| \__|",
    r"                                 $$\   $$ |                                            ",
    r"                                 \$$$$$$  |                                            ",
    r"                                  \______/                                             ",
)

_HEAD = "\n\n|  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *\n\n\n"

_MENU = (
    "| MENU \n|\n| ( 1 ) - Criar novo Funcionario \n| ( 2 ) - Deletar Funcionario \n"
    "| ( 3 ) - Exibir todos os funcionarios \n| ( 0 ) - Encerrar \n"
)

EMPTY_INPUT_WARNING = "\n| AVISO: A entrada nao pode ser vazia.\n\n"
INVALID_NUMBER_ERROR = "\n| ERROR: Entrada invalida. Por favor, insira apenas numeros.\n\n"


def is_digits(text: str) -> bool:
    """True when text is non-empty and made only of ASCII digits."""
    return bool(text) and text.isascii() and text.isdigit()


class Console:
    """Prompts and messages on a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def read_line(self) -> str:
        """Read one line without its newline; raise EOFError at end of input."""
        line = self._stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line[:-1] if line.endswith("\n") else line

    def read_token(self) -> str:
        """Read the first word of the next non-blank line, dropping the rest."""
        while True:
            words = self.read_line().split()
            if words:
                return words[0]

    def read_text(self, prompt: str) -> str | None:
        """Prompt for a line; return None (after a warning) when it is empty."""
        self.write(prompt)
        line = self.read_line()
        if not line:
            self.write(EMPTY_INPUT_WARNING)
            return None
        return line

    def read_number(self, prompt: str, kind: str) -> int | float:
        """Prompt until a digits-only word is entered; 'I' gives int, 'F' float."""
        kind = kind.upper()
        if kind not in ("I", "F"):
            raise ValueError(f"unknown number kind: {kind!r}")
        while True:
            self.write(prompt)
            token = self.read_token()
            if is_digits(token):
                return int(token) if kind == "I" else float(token)
            self.write(INVALID_NUMBER_ERROR)

    def print_logo(self) -> None:
        self.write("".join(line + "\n" for line in _LOGO))

    def print_head(self) -> None:
        self.write(_HEAD)

    def print_menu(self) -> None:
        self.write(_MENU)