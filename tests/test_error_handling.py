from __future__ import annotations

import io

import pytest

from lox_ref.evaluator import evaluate
from lox_ref.runner import StderrReporter, run_statements
from lox_ref.token_types import make_token
from lox_ref.types import LoxRuntimeError
from tests.support.harness import (
    OPERAND_ERROR,
    PLUS_ERROR,
    bin_,
    group,
    lit,
    run_program,
    say,
    un,
)


def test_unary_error_points_at_unary_token() -> None:
    expr = un("-", lit("x"), line=4, column=9)

    with pytest.raises(LoxRuntimeError) as excinfo:
        evaluate(expr)

    err = excinfo.value
    assert err.message == OPERAND_ERROR
    assert err.token.type == "MINUS"
    assert (err.line, err.column) == (4, 9)
    assert str(err) == f"{OPERAND_ERROR} (line 4, col 9)"


def test_binary_error_points_at_operator_not_operand() -> None:
    inner = un("-", lit(1), line=1, column=1)
    expr = bin_(inner, "+", lit("s"), line=2, column=5)

    with pytest.raises(LoxRuntimeError) as excinfo:
        evaluate(expr)

    assert excinfo.value.message == PLUS_ERROR
    assert excinfo.value.line == 2


def test_nested_error_propagates_unchanged() -> None:
    failing = un("-", lit(None), line=7, column=3)
    expr = bin_(group(failing), "==", lit(1), line=8, column=1)

    with pytest.raises(LoxRuntimeError) as excinfo:
        evaluate(expr)

    # equality never fails, so the error must come from the operand
    assert excinfo.value.line == 7


def test_left_operand_error_wins() -> None:
    left = un("-", lit("l"), line=1, column=1)
    right = un("-", lit("r"), line=1, column=10)

    with pytest.raises(LoxRuntimeError) as excinfo:
        evaluate(bin_(left, "==", right))

    assert excinfo.value.column == 1


def test_error_without_location_renders_message_only() -> None:
    tok = make_token("+")
    tok.line = None
    err = LoxRuntimeError(tok, PLUS_ERROR)

    assert str(err) == PLUS_ERROR


def test_stderr_reporter_format() -> None:
    run = run_program([say(lit(1)), say(bin_(lit(1), ">", lit("a"), line=3))])

    assert run.stderr == f"{OPERAND_ERROR}\n[line 3]\n"
    assert run.reporter.had_runtime_error
    assert run.reporter.exit_code == 70

    run.reporter.reset()
    assert run.reporter.exit_code == 0


def test_stderr_reporter_python_trace(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOX_DEBUG_PY_TRACE", "1")
    stream = io.StringIO()
    reporter = StderrReporter(stream)

    try:
        evaluate(un("-", lit("x")))
    except LoxRuntimeError as err:
        reporter.runtime_error(err)

    assert "Python traceback:" in stream.getvalue()


def test_stderr_reporter_trace_off_by_default() -> None:
    run = run_program([say(un("-", lit("x")))])

    assert "Python traceback" not in run.stderr


def test_stderr_reporter_shows_offending_source_line() -> None:
    source = "print 1;\nprint 2 > \"a\";\n"
    err = io.StringIO()
    program = [say(lit(1)), say(bin_(lit(2), ">", lit("a"), line=2, column=9))]

    code = run_statements(program, out=io.StringIO(), err=err, source=source)

    assert code == 70
    assert err.getvalue() == f'{OPERAND_ERROR}\n[line 2]\n    print 2 > "a";\n'


def test_source_line_absent_without_source_or_out_of_range() -> None:
    error = LoxRuntimeError(make_token("-", line=5), OPERAND_ERROR)
    assert error.source_line() is None

    error.source = "one line only"
    assert error.source_line() is None

    error.source = "a\nb\nc\nd\nfifth"
    assert error.source_line() == "fifth"
