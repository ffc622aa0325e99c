from src.main.engine.state import AnalysisState
from src.main.metrics import metric


@metric("Program statements")
def program_statements(state: AnalysisState) -> int:
    return state.counters.statement_operator_count


@metric("Gilb CL (amount of ifs)")
def amount_of_ifs(state: AnalysisState) -> int:
    return state.counters.decision_count


@metric("Gilb cl (decision density)")
def decision_density(state: AnalysisState) -> float:
    statements = state.counters.statement_operator_count
    return state.counters.decision_count / statements if statements else 0.0


@metric("Gilb CLI (max if depth)")
def max_if_depth(state: AnalysisState) -> int:
    return state.counters.max_if_depth
