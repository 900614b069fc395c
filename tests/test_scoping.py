from __future__ import annotations

from textwrap import dedent

import pytest

from tally.evaluator import evaluate
from tally.types import Environment, TlyNumber
from tests.support.harness import (
    UndefinedVariableError,
    parse_source,
    run_program,
    run_runtime_case,
)

SCENARIOS = [
    pytest.param("x=5; x+1", ("number", 6), None, id="assign-then-read"),
    pytest.param("x = 5\nx + 1", ("number", 6), None, id="newline-separated"),
    pytest.param("x = 4", ("number", 4), None, id="assignment-yields-value"),
    pytest.param("a = b = 3; a + b", ("number", 6), None, id="chained-assignment"),
    pytest.param("x = 1; x = x + 1; x", ("number", 2), None, id="rebind-uses-old-value"),
    pytest.param("x = 2; y = x * 10; y", ("number", 20), None, id="derived-binding"),
    pytest.param("printer = 3; printer", ("number", 3), None, id="keyword-prefixed-name"),
    pytest.param("y + 1", None, UndefinedVariableError, id="undefined-read"),
    pytest.param("x = x + 1", None, UndefinedVariableError, id="self-reference-before-bind"),
    pytest.param(
        dedent(
            """\
            total = 0
            total = total + 5
            total = total * 2
            total
        """
        ),
        ("number", 10),
        None,
        id="accumulate",
    ),
]


@pytest.mark.parametrize("source, expectation, expected_exc", SCENARIOS)
def test_scoping(source: str, expectation, expected_exc) -> None:
    run_runtime_case(source, expectation, expected_exc)


def test_runs_do_not_share_bindings() -> None:
    run_program("x = 1")

    with pytest.raises(UndefinedVariableError) as exc_info:
        run_program("x")

    assert exc_info.value.name == "x"


def test_caller_supplied_environment_is_mutated_in_place() -> None:
    env = Environment()
    env.define("y", TlyNumber(2.0))

    result = evaluate(parse_source("z = y * 3; z + 1"), env)

    assert result == TlyNumber(7.0)
    assert env.vars == {"y": TlyNumber(2.0), "z": TlyNumber(6.0)}
    assert "z" in env


def test_environment_lookup_of_missing_name_raises() -> None:
    env = Environment()

    with pytest.raises(UndefinedVariableError):
        env.get("missing")


def test_environment_routes_print_to_its_sink(sink) -> None:
    env = Environment(out=sink)

    evaluate(parse_source('print "to sink"; q = 1'), env)

    assert sink.getvalue() == "to sink\n"
    assert env.vars == {"q": TlyNumber(1.0)}
