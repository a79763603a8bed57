"""Exception hierarchy for the bitonic tour solver.

Every error derives from :class:`BitonicTourError` and from the builtin
exception a caller would naturally expect, so ``except ValueError`` around
ingestion keeps working.
"""

from __future__ import annotations

__all__ = [
    "BitonicTourError",
    "DuplicateCoordinate",
    "InvalidCoordinate",
    "IndexOutOfRange",
    "EmptyProblem",
    "UnknownTour",
    "InvalidCall",
    "InvalidCost",
]


class BitonicTourError(Exception):
    """Base class for all solver errors."""


# ---------------------------------------------------------------------------
#  User input
# ---------------------------------------------------------------------------
class DuplicateCoordinate(BitonicTourError, ValueError):
    def __init__(self, x: float, y: float, existing_y: float) -> None:
        self.x = x
        self.y = y
        self.existing_y = existing_y
        super().__init__(
            f"point ({x}, {y}) duplicates previous point ({x}, {existing_y})"
        )


class InvalidCoordinate(BitonicTourError, ValueError):
    pass


class EmptyProblem(BitonicTourError, ValueError):
    pass


# ---------------------------------------------------------------------------
#  Contract / engine invariants
# ---------------------------------------------------------------------------
class IndexOutOfRange(BitonicTourError, IndexError):
    pass


class UnknownTour(BitonicTourError, KeyError):
    def __init__(self, i: int, j: int) -> None:
        self.i = i
        self.j = j
        super().__init__(f"don't know the value of cost({i},{j})")

    def __str__(self) -> str:
        # KeyError repr-quotes its argument; keep the plain message.
        return str(self.args[0])


class InvalidCall(BitonicTourError, RuntimeError):
    pass


class InvalidCost(BitonicTourError, ValueError):
    pass
