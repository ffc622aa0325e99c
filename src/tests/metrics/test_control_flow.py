import pytest

from src.main.engine.state import AnalysisState
from src.main.metrics.control_flow import (
    amount_of_ifs,
    decision_density,
    max_if_depth,
    program_statements,
)


def make_state(decisions: int, statements: int, depth: int) -> AnalysisState:
    state = AnalysisState()
    state.counters.decision_count = decisions
    state.counters.statement_operator_count = statements
    state.counters.max_if_depth = depth
    return state


@pytest.mark.parametrize(
    "decisions, statements, expected",
    [
        pytest.param(0, 0, 0.0, id="empty-program"),
        pytest.param(3, 0, 0.0, id="zero-denominator"),
        pytest.param(0, 5, 0.0, id="no-decisions"),
        pytest.param(2, 4, 0.5, id="half"),
    ],
)
def test_decision_density(decisions: int, statements: int, expected: float) -> None:
    assert decision_density(make_state(decisions, statements, 0)) == expected


def test_counters_are_reported_as_is():
    state = make_state(2, 7, 3)
    assert amount_of_ifs(state) == 2
    assert program_statements(state) == 7
    assert max_if_depth(state) == 3
