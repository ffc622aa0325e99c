from dataclasses import dataclass, field

from src.main.engine.identifiers import IdentifierGraph
from src.main.engine.scope import ScopeStack
from src.main.engine.tally import ComplexityCounters, TallyStore


@dataclass
class AnalysisState:
    """Everything one analysis run mutates. Never shared between runs."""

    tally: TallyStore = field(default_factory=TallyStore)
    counters: ComplexityCounters = field(default_factory=ComplexityCounters)
    scopes: ScopeStack = field(default_factory=ScopeStack)
    identifiers: IdentifierGraph = field(default_factory=IdentifierGraph)
