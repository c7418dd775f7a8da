"""Interactive read-eval-print loop with line editing and history."""

from __future__ import annotations

import logging
import readline
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from lispy import __version__
from lispy.config import get_history_file, get_prompt
from lispy.errors import LispyError, LispySyntaxError
from lispy.interpreter import Interpreter

logger = logging.getLogger(__name__)

BANNER = f"Lispy Couch Version {__version__}\nPress 'ctrl-c' to exit\n"


class Repl:
    def __init__(
        self,
        interp: Optional[Interpreter] = None,
        prompt: Optional[str] = None,
        history_file: Optional[Path] = None,
        out: TextIO = sys.stdout,
    ):
        self.interp = interp or Interpreter()
        self.prompt = get_prompt() if prompt is None else prompt
        self.history_file = history_file
        self.out = out

    def complete(self, text: str, state: int) -> Optional[str]:
        m = [k for k in self.interp.env.names() if k.startswith(text)]
        try:
            return m[state]
        except IndexError:
            return None

    def start(self) -> None:
        readline.set_history_length(1000)
        readline.set_completer(self.complete)
        readline.set_completer_delims(" (){}")
        readline.parse_and_bind("tab: complete")
        if self.history_file is None:
            return
        try:
            readline.read_history_file(self.history_file)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("could not read history file %s: %s", self.history_file, e)

    def stop(self) -> None:
        if self.history_file is None:
            return
        try:
            readline.write_history_file(self.history_file)
        except OSError as e:
            logger.warning("could not write history file %s: %s", self.history_file, e)

    def handle(self, line: str) -> str:
        """Evaluate one line and return the text to print for it."""
        try:
            return self.interp.eval_to_string(line)
        except LispySyntaxError as e:
            where = f"{e.line}:{e.column}" if e.line is not None else "?"
            return f"<stdin>:{where}: error: {str(e).splitlines()[0]}"
        except LispyError as e:
            return f"error: {e}"

    def run(self, read_line: Callable[[str], str] = input) -> None:
        self.start()
        print(BANNER, file=self.out)
        try:
            while True:
                try:
                    line = read_line(self.prompt)
                except EOFError:
                    break
                print(self.handle(line), file=self.out)
        except KeyboardInterrupt:
            pass
        finally:
            self.stop()
        print("Thank you", file=self.out)


def repl(interp: Optional[Interpreter] = None) -> None:
    Repl(interp, history_file=get_history_file()).run()
