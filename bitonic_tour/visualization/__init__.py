"""Pygame visualization of the bitonic-tour DP and its final tour."""
