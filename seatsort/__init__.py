"""
SeatSort - Odd/Even Classification and Seat Mapping

Classifies a bounded integer dataset into odd and even partitions, sorts
each partition and arranges the values on a seat grid.
"""

__version__ = "1.0.0"
__author__ = "SeatSort Team"

# Export main classes for easy importing
from .classification import ClassificationStrategy, classify, is_odd
from .sorting import SortStrategy, sort_values, quick_sort, heap_sort
from .dataset import Dataset, insert_value, MIN_N, MAX_N
from .seating import (
    LayoutMode,
    OddSide,
    SeatConfig,
    SeatMap,
    gen_seat_map,
    resolve_dimensions,
    MAX_ROWS,
    MAX_COLS
)
from .pipeline import SeatingPipeline, PipelineResult, BenchmarkResult
from .errors import SeatSortError, CapacityExceeded, InsufficientData, InvalidConfiguration

__all__ = [
    'ClassificationStrategy',
    'classify',
    'is_odd',
    'SortStrategy',
    'sort_values',
    'quick_sort',
    'heap_sort',
    'Dataset',
    'insert_value',
    'MIN_N',
    'MAX_N',
    'LayoutMode',
    'OddSide',
    'SeatConfig',
    'SeatMap',
    'gen_seat_map',
    'resolve_dimensions',
    'MAX_ROWS',
    'MAX_COLS',
    'SeatingPipeline',
    'PipelineResult',
    'BenchmarkResult',
    'SeatSortError',
    'CapacityExceeded',
    'InsufficientData',
    'InvalidConfiguration'
]
