"""Ingestion, presentation and instance-generation helpers."""

from bitonic_tour.data.io_utils import load_points, parse_point_line, read_points, write_solution_json
from bitonic_tour.data.schemas import Solution, format_solution, solution_to_dict, validate_solution

__all__ = [
    "Solution",
    "format_solution",
    "solution_to_dict",
    "validate_solution",
    "parse_point_line",
    "read_points",
    "load_points",
    "write_solution_json",
]
