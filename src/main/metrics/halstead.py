import math
from typing import Dict, Tuple

from src.main.engine.state import AnalysisState
from src.main.engine.tally import TallyStore
from src.main.metrics import metric


def counts(tally: TallyStore) -> Tuple[int, int, int, int]:
    N1 = sum(tally.operators.values())
    N2 = sum(tally.operands.values())
    n1 = len(tally.operators)
    n2 = len(tally.operands)
    return N1, N2, n1, n2


def derived(tally: TallyStore) -> Dict[str, float]:
    N1, N2, n1, n2 = counts(tally)
    N = N1 + N2
    n = n1 + n2
    V = N * math.log2(n) if n else 0
    D = (n1 / 2) * (N2 / n2) if n2 else 0
    E = D * V
    T = E / 18
    B = (E ** (2 / 3)) / 3000 if E else 0
    return {
        "Halstead Length": N,
        "Halstead Vocabulary": n,
        "Halstead Volume": V,
        "Halstead Difficulty": D,
        "Halstead Effort": E,
        "Halstead Time": T,
        "Halstead Bugs": B,
    }


@metric("Unique operators")
def unique_operators(state: AnalysisState) -> int:
    return counts(state.tally)[2]


@metric("Unique operands")
def unique_operands(state: AnalysisState) -> int:
    return counts(state.tally)[3]


@metric("Total operators")
def total_operators(state: AnalysisState) -> int:
    return counts(state.tally)[0]


@metric("Total operands")
def total_operands(state: AnalysisState) -> int:
    return counts(state.tally)[1]


@metric("Program dictionary")
def program_dictionary(state: AnalysisState) -> int:
    return derived(state.tally)["Halstead Vocabulary"]


@metric("Program length")
def program_length(state: AnalysisState) -> int:
    return derived(state.tally)["Halstead Length"]


@metric("Program volume")
def program_volume(state: AnalysisState) -> float:
    return derived(state.tally)["Halstead Volume"]


@metric("Halstead Difficulty")
def halstead_difficulty(state: AnalysisState) -> float:
    return derived(state.tally)["Halstead Difficulty"]


@metric("Halstead Effort")
def halstead_effort(state: AnalysisState) -> float:
    return derived(state.tally)["Halstead Effort"]


@metric("Halstead Time")
def halstead_time(state: AnalysisState) -> float:
    return derived(state.tally)["Halstead Time"]


@metric("Halstead Bugs")
def halstead_bugs(state: AnalysisState) -> float:
    return derived(state.tally)["Halstead Bugs"]
