import logging
from typing import Set

from src.main.config import INPUT_SENTINEL, OUTPUT_SENTINEL, SENTINELS
from src.main.engine.identifiers import ChepinType, IdentifierGraph

logger = logging.getLogger(__name__)


def propagate_input(graph: IdentifierGraph) -> None:
    """Direct neighbours of the input sentinel become predicates (one hop)."""
    for name in graph.input_neighbours():
        if name in SENTINELS:
            continue
        graph[name].classification = ChepinType.PREDICATE


def reaches_output(graph: IdentifierGraph, start: str) -> bool:
    """Depth-first search over ``used_with`` edges for the output sentinel."""
    seen: Set[str] = set()
    stack = [start]
    while stack:
        name = stack.pop()
        if name == OUTPUT_SENTINEL:
            return True
        if name in seen:
            continue
        seen.add(name)
        stack.extend(n for n in graph[name].used_with if n not in seen)
    return False


def mark_unreachable(graph: IdentifierGraph) -> None:
    for name in list(graph.records):
        if name == INPUT_SENTINEL:
            continue
        if not reaches_output(graph, name):
            logger.debug("%s does not reach %s", name, OUTPUT_SENTINEL)
            graph[name].classification = ChepinType.TRANSIENT


def finalize(graph: IdentifierGraph) -> None:
    """Run both passes; the output pass may undo an input classification."""
    propagate_input(graph)
    mark_unreachable(graph)
