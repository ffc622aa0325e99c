from src.main.config import INPUT_SENTINEL, OUTPUT_SENTINEL
from src.main.engine.identifiers import ChepinType, IdentifierGraph
from src.main.engine.reachability import (
    finalize,
    mark_unreachable,
    propagate_input,
    reaches_output,
)
from src.main.engine.scope import Assignment, Block


def _graph_with_input(target: str) -> IdentifierGraph:
    graph = IdentifierGraph()
    graph.observe(target, Block())
    graph.observe(INPUT_SENTINEL, Assignment(target))
    return graph


def test_input_propagation_is_one_hop():
    graph = _graph_with_input("x")
    graph.observe("y", Block())
    graph.observe("x", Assignment("y"))

    propagate_input(graph)

    assert graph["x"].classification == ChepinType.PREDICATE
    assert graph["y"].classification == ChepinType.TRANSIENT


def test_output_sentinel_is_trivially_reachable():
    graph = IdentifierGraph()
    assert reaches_output(graph, OUTPUT_SENTINEL)


def test_reachability_is_transitive_and_survives_cycles():
    graph = IdentifierGraph()
    for name in ("a", "b", "c"):
        graph.observe(name, Block())
    graph.observe("a", Assignment("b"))
    graph.observe("b", Assignment("c"))
    graph.observe("c", Assignment("a"))
    assert not reaches_output(graph, "a")

    graph.observe("c", Assignment(OUTPUT_SENTINEL))
    assert reaches_output(graph, "a")


def test_unreachable_names_become_transient():
    graph = IdentifierGraph()
    graph.observe("kept", Block())
    graph.observe("kept", Assignment(OUTPUT_SENTINEL))
    graph.observe("lost", Assignment("kept"))
    graph.observe("alone", Assignment(OUTPUT_SENTINEL))
    graph.observe("island", Block())
    graph.observe("other", Assignment("island"))

    mark_unreachable(graph)

    assert graph["kept"].classification == ChepinType.TRANSIENT
    assert graph["lost"].classification == ChepinType.MODIFIED
    assert graph["alone"].classification == ChepinType.MODIFIED
    assert graph["other"].classification == ChepinType.TRANSIENT


def test_unreachability_overrides_input_classification():
    graph = _graph_with_input("x")
    finalize(graph)
    assert graph["x"].classification == ChepinType.TRANSIENT


def test_reachable_input_target_stays_predicate():
    graph = _graph_with_input("x")
    graph.observe("x", Assignment(OUTPUT_SENTINEL))
    finalize(graph)
    assert graph["x"].classification == ChepinType.PREDICATE
