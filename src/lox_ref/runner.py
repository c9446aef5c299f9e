from __future__ import annotations

import logging
import sys
import traceback
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from lark import Tree
from typing_extensions import Protocol

from .evaluator import exec_node
from .types import Frame, LoxRuntimeError
from .tree import tree_label
from .utils import debug_py_trace_enabled

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RUNTIME_ERROR = 70

class ErrorReporter(Protocol):
    def runtime_error(self, error: LoxRuntimeError) -> None: ...

class StderrReporter:
    """Default reporter: prints ``message`` then ``[line N]`` and remembers that a run failed."""

    def __init__(self, stream: Optional[TextIO]=None):
        self._stream = stream
        self.had_runtime_error = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    @property
    def exit_code(self) -> int:
        return EXIT_RUNTIME_ERROR if self.had_runtime_error else EXIT_OK

    def reset(self) -> None:
        self.had_runtime_error = False

    def runtime_error(self, error: LoxRuntimeError) -> None:
        out = self.stream
        line = error.line
        out.write(error.message + "\n")

        if line is not None:
            out.write(f"[line {line}]\n")

        text = error.source_line()
        if text is not None:
            out.write(f"    {text}\n")

        if debug_py_trace_enabled() and error.__traceback__ is not None:
            out.write("\nPython traceback:\n")
            out.write("".join(traceback.format_tb(error.__traceback__)))

        self.had_runtime_error = True

@dataclass(frozen=True)
class RunResult:
    executed: int
    error: Optional[LoxRuntimeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

def interpret(statements: Iterable[Tree], frame: Optional[Frame]=None, reporter: Optional[ErrorReporter]=None) -> RunResult:
    """
    Execute statements in order.
    - The first LoxRuntimeError stops the sequence; nothing after it runs.
    - That error goes to ``reporter`` (a fresh StderrReporter when omitted).
    - Anything that is not a LoxRuntimeError propagates unchanged.
    """
    if frame is None:
        frame = Frame()

    if reporter is None:
        reporter = StderrReporter()

    stmts = list(statements)
    log.debug("interpreting %d statement(s)", len(stmts))
    executed = 0

    for stmt in stmts:
        error = _execute_one(stmt, frame)

        if error is not None:
            log.debug("runtime error in statement %d (%s): %s", executed + 1, tree_label(stmt), error)
            reporter.runtime_error(error)
            return RunResult(executed=executed, error=error)

        executed += 1

    return RunResult(executed=executed)

def _execute_one(stmt: Tree, frame: Frame) -> Optional[LoxRuntimeError]:
    log.debug("executing %s", tree_label(stmt))

    try:
        exec_node(stmt, frame)
    except LoxRuntimeError as err:
        if err.source is None:
            err.source = frame.source
        return err

    return None

def run_statements(statements: Iterable[Tree], out: Optional[TextIO]=None, err: Optional[TextIO]=None, source: Optional[str]=None) -> int:
    """Driver-style helper: interpret with default collaborators and return a process exit code."""
    reporter = StderrReporter(err)
    interpret(statements, Frame(out=out, source=source), reporter)

    return reporter.exit_code
