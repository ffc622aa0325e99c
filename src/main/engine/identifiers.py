"""
Identifier use-graph and Chepin classification.

Every identifier occurrence found by the walker is fed to
``IdentifierGraph.observe`` together with the scope frame it appeared in.
Assignments connect the names on their right-hand side with their target by
an undirected edge; the reachability pass later decides, from these edges,
which variables are connected to the program's input and output.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Set

from src.main.config import INPUT_SENTINEL, SENTINELS
from src.main.engine.errors import ContractViolation
from src.main.engine.scope import Assignment, ControlCondition, ScopeFrame


class ChepinType(IntEnum):
    PREDICATE = 1
    MODIFIED = 2
    CONTROL = 3
    TRANSIENT = 4


@dataclass
class IdentifierRecord:
    classification: ChepinType
    occurrence_count: int = 1
    used_with: Set[str] = field(default_factory=set)


@dataclass
class ChepinTable:
    predicate: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    control: List[str] = field(default_factory=list)
    transient: List[str] = field(default_factory=list)

    @property
    def groups(self) -> List[List[str]]:
        return [self.predicate, self.modified, self.control, self.transient]

    @property
    def q(self) -> float:
        return (
            len(self.predicate)
            + 2 * len(self.modified)
            + 3 * len(self.control)
            + 0.5 * len(self.transient)
        )


def implied_classification(scope: ScopeFrame) -> ChepinType:
    if isinstance(scope, Assignment):
        return ChepinType.MODIFIED
    if isinstance(scope, ControlCondition):
        return ChepinType.CONTROL
    return ChepinType.TRANSIENT


class IdentifierGraph:
    """
    Mapping from identifier name to its record, seeded with the input and
    output sentinels.
    """

    def __init__(self) -> None:
        self.records: Dict[str, IdentifierRecord] = {
            name: IdentifierRecord(ChepinType.TRANSIENT, occurrence_count=0)
            for name in SENTINELS
        }

    def __contains__(self, name: str) -> bool:
        return name in self.records

    def __getitem__(self, name: str) -> IdentifierRecord:
        return self.records[name]

    def observe(self, name: str, scope: ScopeFrame) -> None:
        """
        Register one occurrence of ``name`` in the given scope frame.

        Args:
            name (str): Identifier text.
            scope (ScopeFrame): Frame on top of the scope stack.

        Raises:
            ContractViolation: If the frame is an assignment whose target was
                never registered.
        """
        if isinstance(scope, Assignment) and scope.target not in self.records:
            raise ContractViolation(
                f"assignment target {scope.target!r} observed before registration"
            )

        implied = implied_classification(scope)
        record = self.records.get(name)
        if record is None:
            record = IdentifierRecord(implied)
            self.records[name] = record
        else:
            record.classification = max(record.classification, implied)
            record.occurrence_count += 1

        if isinstance(scope, Assignment):
            record.used_with.add(scope.target)
            self.records[scope.target].used_with.add(name)

    def names(self) -> List[str]:
        """Source identifiers, sentinels excluded."""
        return [name for name in self.records if name not in SENTINELS]

    def chepin_table(self) -> ChepinTable:
        table = ChepinTable()
        for name in sorted(self.names()):
            table.groups[self.records[name].classification - 1].append(name)
        return table

    def input_neighbours(self) -> Set[str]:
        return set(self.records[INPUT_SENTINEL].used_with)
