"""Interactive shell and file runner for Eta.

The shell only talks to the core through the Interpreter facade: each input
line is one call to `run_one` against a root Environment that lives for the
whole session. EtaErrors are reported and the loop continues; `exit` inside
Eta code raises SystemExit and ends the process.
"""

from __future__ import annotations

import argparse
import logging
import readline
import sys
from pathlib import Path

from eta import config
from eta.errors import EtaError
from eta.interpreter import Interpreter
from eta.printer import to_display

logger = logging.getLogger(__name__)


class REPL:
    def __init__(self, interp: Interpreter):
        self.interp = interp
        self.history = config.get_history_file()
        self.prompt = config.get_prompt()

    def complete(self, text: str, state: int):
        matches = sorted(
            name for name in self._visible_names() if name.startswith(text)
        )
        try:
            return matches[state]
        except IndexError:
            return None

    def _visible_names(self) -> set[str]:
        names: set[str] = set()
        env = self.interp.env
        while env is not None:
            names.update(str(k) for k in env.vars)
            env = env.outer
        return names

    def start(self) -> None:
        readline.set_history_length(config.get_history_size())
        readline.set_completer(self.complete)
        readline.set_completer_delims(' ()"')
        readline.parse_and_bind("tab: complete")
        try:
            readline.read_history_file(self.history)
        except FileNotFoundError:
            logger.debug("no history file at %s", self.history)

    def stop(self) -> None:
        try:
            readline.write_history_file(self.history)
        except OSError as e:
            logger.warning("could not write history to %s: %s", self.history, e)

    def eval_line(self, line: str) -> str:
        """Evaluate one input line and return what should be printed."""
        try:
            return to_display(self.interp.eval(line))
        except EtaError as e:
            return f"{type(e).__name__}: {e}"
        except RecursionError:
            # Not an EvalError: the core has no tail calls or depth guard
            return "RecursionError: maximum recursion depth exceeded"

    def run(self) -> None:
        self.start()
        try:
            while True:
                try:
                    line = input(self.prompt)
                except EOFError:
                    break
                if not line.strip():
                    continue
                print(self.eval_line(line))
        except KeyboardInterrupt:
            pass
        finally:
            self.stop()
        print()


def run_file(path: Path) -> int:
    """Evaluate every form in `path` and print the last result."""
    source = path.read_text(encoding="utf-8")
    try:
        result = Interpreter().eval_all(source)
    except EtaError as e:
        logger.error("%s: %s: %s", path, type(e).__name__, e)
        return 1
    print(to_display(result))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="eta",
        description="Evaluate an Eta program, or start an interactive session",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Program to run; without it an interactive REPL starts",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.get_log_level(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.file is not None:
        return run_file(args.file)
    REPL(Interpreter()).run()
    return 0
