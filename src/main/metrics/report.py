from typing import List, Tuple, Union

from src.main.engine.state import AnalysisState
from src.main.metrics import registry


def format_value(value: Union[int, float]) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def compute_properties(state: AnalysisState) -> List[Tuple[str, str]]:
    """
    Evaluate every registered metric on a finished analysis state.

    Args:
        state (AnalysisState): State after the walk and the reachability passes.

    Returns:
        list: (label, formatted value) pairs in registration order.
    """
    return [(name, format_value(fn(state))) for name, fn in registry.items()]
