"""monkey CLI entry point.

Usage:
    monkey                      Start the interactive shell (one line at a time)
    monkey tokenize <text>      Display the token stream for <text> (debug)

Options:
    --int-bits <N>              Reject integer literals wider than N unsigned bits
    --debug                     Enable debug logging
    --version                   Show the version and exit
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from monkey import __version__
from monkey.lexer.lexer import Lexer, LexerError
from monkey.lexer.tokens import Token

logger = logging.getLogger(__name__)

USAGE = __doc__.strip()


class Shell:
    """Read-tokenize-print loop.

    Each line is tokenized on its own; nothing carries over between lines.
    The loop ends at end of input or on Ctrl+C.
    """

    PROMPT = ">> "

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        *,
        prompt: str = PROMPT,
        integer_bits: int | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt
        self.integer_bits = integer_bits

    def evaluate(self, line: str) -> list[Token]:
        logger.debug("Evaluating %r", line)
        return Lexer(line, integer_bits=self.integer_bits).tokenize()

    def show(self, line: str, *, one_per_line: bool = False) -> bool:
        """Print the tokens of ``line``, or the lexer error; False on error."""
        try:
            tokens = self.evaluate(line)
        except LexerError as e:
            print(f"Lexer error: {e}", file=self.stdout)
            return False

        if one_per_line:
            for tok in tokens:
                print(tok, file=self.stdout)
        else:
            print(tokens, file=self.stdout)
        return True

    def run(self) -> int:
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()

            try:
                line = self.stdin.readline()
            except KeyboardInterrupt:
                line = ""
            if not line:
                self.stdout.write("\n")
                return 0

            self.show(line.rstrip("\r\n"))


def main(argv: list[str] | None = None) -> int:
    args = list(argv if argv is not None else sys.argv[1:])

    if "--debug" in args:
        args.remove("--debug")
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    integer_bits = None
    if "--int-bits" in args:
        idx = args.index("--int-bits")
        try:
            integer_bits = int(args[idx + 1])
        except (IndexError, ValueError):
            integer_bits = 0
        if integer_bits <= 0:
            print("Error: --int-bits requires a positive integer")
            return 1
        del args[idx:idx + 2]

    shell = Shell(integer_bits=integer_bits)
    if not args:
        return shell.run()

    command, rest = args[0], args[1:]

    if command in ("--help", "-h", "--version"):
        print(f"monkey {__version__}" if command == "--version" else USAGE)
        return 0

    if command == "tokenize" and rest:
        return 0 if shell.show(" ".join(rest), one_per_line=True) else 1

    if command == "tokenize":
        print("Error: 'tokenize' requires a text argument")
    else:
        print(f"Error: unknown command '{command}'")
        print(USAGE)
    return 1


if __name__ == "__main__":
    sys.exit(main())
