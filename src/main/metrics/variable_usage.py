from src.main.engine.state import AnalysisState
from src.main.metrics import metric


@metric("Chepin Q")
def chepin_q(state: AnalysisState) -> float:
    return state.identifiers.chepin_table().q
