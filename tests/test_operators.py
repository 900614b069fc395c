from __future__ import annotations

import pytest

from tests.support.harness import (
    ParseError,
    run_runtime_case,
)

SCENARIOS = [
    pytest.param("2+3*4", ("number", 14), None, id="precedence-mul-over-add"),
    pytest.param("(2+3)*4", ("number", 20), None, id="parens-override"),
    pytest.param("10 - 4 - 3", ("number", 3), None, id="sub-left-assoc"),
    pytest.param("100 / 10 / 5", ("number", 2), None, id="div-left-assoc"),
    pytest.param("7 / 2", ("number", 3.5), None, id="div-fractional"),
    pytest.param("7 % 3", ("number", 1), None, id="mod-basic"),
    pytest.param("-7 % 3", ("number", 2), None, id="mod-sign-follows-divisor"),
    pytest.param("2 ^ 3", ("number", 8), None, id="power-basic"),
    pytest.param("2 ^ 3 ^ 2", ("number", 512), None, id="power-right-assoc"),
    pytest.param("-2 ^ 2", ("number", -4), None, id="power-binds-tighter-than-neg"),
    pytest.param("(-2) ^ 2", ("number", 4), None, id="power-negative-base"),
    pytest.param("2 ^ -1", ("number", 0.5), None, id="power-negative-exponent"),
    pytest.param("--3", ("number", 3), None, id="double-negation"),
    pytest.param("1 - -1", ("number", 2), None, id="minus-negative"),
    pytest.param("1.5e2 + 0.5", ("number", 150.5), None, id="float-literals"),
    pytest.param("0.1 + 0.2", ("number", 0.3), None, id="float-sum"),
    pytest.param("3 == 3", ("number", 1), None, id="eq-true"),
    pytest.param("3 != 3", ("number", 0), None, id="neq-false"),
    pytest.param("2 < 3", ("number", 1), None, id="lt"),
    pytest.param("3 <= 2", ("number", 0), None, id="lte"),
    pytest.param("4 >= 4", ("number", 1), None, id="gte"),
    pytest.param("5 > 6", ("number", 0), None, id="gt"),
    pytest.param("1 + 2 == 3", ("number", 1), None, id="compare-lowest-precedence"),
    pytest.param("(1 < 2) + (2 < 3)", ("number", 2), None, id="compare-results-are-numbers"),
    pytest.param("1 < 2 < 3", None, ParseError, id="compare-non-associative"),
    pytest.param("1; 2; 3", ("number", 3), None, id="last-statement-wins"),
    pytest.param("", ("null", None), None, id="empty-program"),
    pytest.param(";;\n;", ("null", None), None, id="separators-only"),
    pytest.param("# nothing but a comment", ("null", None), None, id="comment-only"),
    pytest.param("1 + 1 # trailing comment", ("number", 2), None, id="trailing-comment"),
]


@pytest.mark.parametrize("source, expectation, expected_exc", SCENARIOS)
def test_operators(source: str, expectation, expected_exc) -> None:
    run_runtime_case(source, expectation, expected_exc)
