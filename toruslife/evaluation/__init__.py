"""Evaluation metrics and analysis tools."""

from .metrics import (
    reference_step,
    population,
    live_cells,
    hamming_distance,
    flip_activity,
    matches_reference,
)

__all__ = [
    'reference_step',
    'population',
    'live_cells',
    'hamming_distance',
    'flip_activity',
    'matches_reference',
]
