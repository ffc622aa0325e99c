"""
Scope frames and the stack that decides how an identifier occurrence is
classified. The frame on top of the stack governs the next occurrence.
"""

from dataclasses import dataclass
from typing import List, Union

from src.main.engine.errors import ContractViolation


@dataclass(frozen=True)
class Block:
    """Plain statement sequence, loop body or program root."""


@dataclass(frozen=True)
class ControlCondition:
    """Inside an if or switch statement."""


@dataclass(frozen=True)
class Assignment:
    """Right-hand side of a declaration or assignment to ``target``."""

    target: str


ScopeFrame = Union[Block, ControlCondition, Assignment]


class ScopeStack:
    def __init__(self) -> None:
        self._frames: List[ScopeFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    def enter(self, frame: ScopeFrame) -> None:
        self._frames.append(frame)

    def exit(self) -> ScopeFrame:
        if not self._frames:
            raise ContractViolation("exit() on an empty scope stack")
        return self._frames.pop()

    def current(self) -> ScopeFrame:
        if not self._frames:
            raise ContractViolation("current() on an empty scope stack")
        return self._frames[-1]
