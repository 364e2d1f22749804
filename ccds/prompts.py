"""
prompts.py

Responsibility: line-oriented interactive prompts.

Invalid menu input is never explained to the user: the menu prompt is simply
issued again. In non-interactive mode every prompt fails immediately with
`InputRequiredError` instead of reading input. End of input reads as an
empty answer wherever an empty answer is meaningful.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from ccds.errors import CCDSError


class PromptError(CCDSError):
    pass


class InputRequiredError(PromptError):
    pass


class Prompter:
    def __init__(
        self,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        interactive: bool = True,
    ) -> None:
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self.interactive = interactive

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _readline(self) -> str | None:
        """One stripped line of input, or None at end of input."""
        if not self.interactive:
            raise InputRequiredError("input required in non-interactive mode")
        line = self._in.readline()
        if line == "":
            return None
        return line.strip()

    def read(self) -> str:
        """Read one line of input; end of input reads as an empty answer."""
        line = self._readline()
        return "" if line is None else line

    def ask(self, prompt: str) -> str:
        self._write(prompt)
        return self.read()

    def confirm(self, prompt: str) -> bool:
        """Yes/no question defaulting to no."""
        self._write(prompt)
        while True:
            answer = self.read()
            if answer == "y":
                return True
            if answer in ("n", ""):
                return False
            self._write("Please answer [y/N]: ")

    def choose(self, title: str, options: Sequence[str], *, default: int | None = None) -> str:
        """
        Numbered (1-indexed) menu. Loops until a valid number is entered.

        With `default` set, an empty answer (or end of input) selects
        `options[default]`. Without one, end of input is a `PromptError`.
        """
        if not options:
            raise PromptError(f"no options to choose from for: {title}")

        numbers = ", ".join(str(i) for i in range(1, len(options) + 1))
        prompt = f"Choose {numbers}: "
        if default is not None:
            prompt = f"Choose {numbers} [{default + 1}]: "

        self._write(f"{title}\n")
        for i, option in enumerate(options, start=1):
            self._write(f"{i} - {option}\n")

        while True:
            self._write(prompt)
            answer = self._readline()
            if answer is None and default is None:
                raise PromptError("unexpected end of input")
            if not answer and default is not None:
                return options[default]
            index = _parse_choice(answer or "", len(options))
            if index is not None:
                return options[index]


def _parse_choice(answer: str, count: int) -> int | None:
    try:
        choice = int(answer)
    except ValueError:
        return None
    if 0 < choice <= count:
        return choice - 1
    return None
