from collections import Counter
from dataclasses import dataclass, field


@dataclass
class TallyStore:
    """Halstead vocabulary: operator and operand token occurrence counts."""

    operators: Counter = field(default_factory=Counter)
    operands: Counter = field(default_factory=Counter)

    def record_operator(self, token: str) -> None:
        self.operators[token] += 1

    def record_operand(self, token: str) -> None:
        self.operands[token] += 1


@dataclass
class ComplexityCounters:
    if_depth: int = 0
    max_if_depth: int = 0
    decision_count: int = 0
    statement_operator_count: int = 0

    def enter_decision(self, depth: int) -> None:
        self.if_depth += depth
        self.decision_count += depth

    def leave_decision(self, depth: int) -> None:
        self.if_depth -= depth

    def update_max_depth(self) -> None:
        self.max_if_depth = max(self.max_if_depth, self.if_depth)
