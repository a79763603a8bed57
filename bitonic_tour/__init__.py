# Solver API – default exports
from .dp_bitonic import BitonicTour, PartialTour, solve_bitonic
from .point_store import PointStore

# Geometry, schemas & constants
from .geometry import Point, closed_tour_length, euclidean, VERBOSE
from .data.schemas import Solution, format_solution
from .common.constants import (
    RNG_SEEDS,
    TOL_NUM,
    seed_everywhere,
)
from .errors import (
    BitonicTourError,
    DuplicateCoordinate,
    EmptyProblem,
    IndexOutOfRange,
    InvalidCall,
    InvalidCoordinate,
    InvalidCost,
    UnknownTour,
)

__version__ = "0.1.0"

__all__ = [
    # solver
    "BitonicTour",
    "PartialTour",
    "PointStore",
    "solve_bitonic",
    # geometry & schemas
    "Point",
    "Solution",
    "closed_tour_length",
    "euclidean",
    "format_solution",
    "VERBOSE",
    "TOL_NUM",
    "RNG_SEEDS",
    "seed_everywhere",
    # errors
    "BitonicTourError",
    "DuplicateCoordinate",
    "InvalidCoordinate",
    "IndexOutOfRange",
    "EmptyProblem",
    "UnknownTour",
    "InvalidCall",
    "InvalidCost",
]
