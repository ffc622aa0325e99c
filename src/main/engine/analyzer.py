"""
Entry point of the metrics engine: syntax tree in, result record out.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from tree_sitter import Node

from src.main.engine.errors import ContractViolation
from src.main.engine.identifiers import ChepinTable
from src.main.engine.reachability import finalize
from src.main.engine.state import AnalysisState
from src.main.engine.tally import ComplexityCounters
from src.main.engine.walker import walk
from src.main.metrics.report import compute_properties

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    operators: Dict[str, int] = field(default_factory=dict)
    operands: Dict[str, int] = field(default_factory=dict)
    chepin: ChepinTable = field(default_factory=ChepinTable)
    counters: ComplexityCounters = field(default_factory=ComplexityCounters)
    properties: List[Tuple[str, str]] = field(default_factory=list)

    def property(self, label: str) -> str:
        return dict(self.properties)[label]


def analyze(root: Node) -> AnalysisResult:
    """
    Compute the Halstead, Gilb and Chepin metrics of one program.

    Args:
        root (Node): ``program`` node of a parsed JavaScript source.

    Returns:
        AnalysisResult: Tallies, Chepin groups, counters and summary properties.

    Raises:
        MalformedInputError: If the tree uses a construct that cannot be measured.
    """
    state = AnalysisState()
    walk(root, state)

    if state.counters.if_depth != 0 or len(state.scopes) != 0:
        raise ContractViolation(
            f"unbalanced walk: if_depth={state.counters.if_depth}, "
            f"open scopes={len(state.scopes)}"
        )

    finalize(state.identifiers)
    result = AnalysisResult(
        operators=dict(state.tally.operators),
        operands=dict(state.tally.operands),
        chepin=state.identifiers.chepin_table(),
        counters=state.counters,
        properties=compute_properties(state),
    )
    logger.debug("Chepin groups: %s", result.chepin.groups)
    return result
