"""
Interactive read-dispatch loop over an input stream.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from rich.console import Console
from rich.text import Text

EXIT_WORDS = frozenset({"exit", "quit"})

Dispatcher = Callable[[Sequence[str]], int]


class InteractiveShell:
    """Reads command lines and hands their tokens to the same dispatcher used for argv."""

    def __init__(
        self,
        dispatch: Dispatcher,
        input_stream: Optional[TextIO] = None,
        prompt: str = "mini> ",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Args:
            dispatch: Callable running one tokenized command and returning its exit status
            input_stream: Stream to read lines from; it is closed when the loop ends.
                Defaults to the process stdin, which is left open.
            prompt: Text printed before each read
            logger: Logger instance to use for logging
        """
        self._dispatch = dispatch
        self._input = input_stream
        self._prompt = prompt
        self._logger = logger or logging.getLogger(__name__)

    def run(self) -> int:
        stream = self._input if self._input is not None else sys.stdin
        console = Console(highlight=False, soft_wrap=True)
        try:
            return self._loop(stream, console)
        finally:
            if self._input is not None:
                stream.close()

    def _loop(self, stream: TextIO, console: Console) -> int:
        try:
            console.print("[bold]mini shell[/bold] - type 'exit' to quit")
            while True:
                console.print(Text(self._prompt, style="cyan"), end="")
                try:
                    line = stream.readline()
                except KeyboardInterrupt:
                    console.print()
                    return 0

                # readline() returns "" only at end of input
                if not line:
                    console.print()
                    return 0

                line = line.strip()
                if not line:
                    continue
                if line.lower() in EXIT_WORDS:
                    return 0

                self._run_line(line)
        except Exception as e:
            self._logger.info(f"Input stream failed: {e}")
            print(f"Fatal error in shell: {e}", file=sys.stderr)
            return 1

    def _run_line(self, line: str) -> None:
        tokens = line.split()
        self._logger.debug(f"Dispatching {tokens}")
        try:
            code = self._dispatch(tokens)
        except Exception as e:
            print(f"Error running command: {e}", file=sys.stderr)
            return

        if code != 0:
            print(f"Command failed with exit code {code}", file=sys.stderr)
