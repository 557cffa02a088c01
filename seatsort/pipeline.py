"""
Seating Pipeline

Runs one pass of raw values -> classification -> sorting -> seat map and
provides a simple timing benchmark for the selected strategies.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .classification import ClassificationStrategy
from .dataset import Dataset
from .seating import SeatConfig, SeatMap, gen_seat_map
from .sorting import SortStrategy

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of a single pipeline run"""
    seat_map: SeatMap
    odd: List[int]
    even: List[int]
    timings: Dict[str, float] = field(default_factory=dict)  # milliseconds


@dataclass
class BenchmarkResult:
    """Classification and sorting time in milliseconds"""
    classify_ms: float
    sort_ms: float

    @property
    def total_ms(self) -> float:
        return self.classify_ms + self.sort_ms

    def summary(self) -> str:
        return (f"classify {self.classify_ms:.3f} ms, sort {self.sort_ms:.3f} ms, "
                f"total {self.total_ms:.3f} ms")


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


class SeatingPipeline:
    """Classify, sort and seat a dataset with a fixed strategy selection"""

    def __init__(self,
                 classifier: ClassificationStrategy = ClassificationStrategy.PARTITION,
                 sorter: SortStrategy = SortStrategy.QUICK,
                 config: Optional[SeatConfig] = None):
        self.classifier = classifier
        self.sorter = sorter
        self.config = config if config is not None else SeatConfig()

    def run(self, dataset: Dataset) -> PipelineResult:
        """
        Run the full pipeline on dataset

        The dataset's odd/even sequences are overwritten with the sorted
        partitions.

        Raises:
            InsufficientData: If the dataset holds fewer than MIN_N values
            InvalidConfiguration: If the layout configuration is invalid
        """
        self.config.validate()

        start = time.perf_counter()
        dataset.classify(self.classifier)
        classify_ms = _elapsed_ms(start)

        start = time.perf_counter()
        dataset.sort(self.sorter)
        sort_ms = _elapsed_ms(start)

        start = time.perf_counter()
        seat_map = gen_seat_map(dataset.odd, dataset.even, self.config)
        seat_ms = _elapsed_ms(start)

        logger.info("Seated %d/%d values on a %dx%d grid (%s, odd side %s)",
                    seat_map.placed_odd + seat_map.placed_even, len(dataset),
                    seat_map.rows, seat_map.cols,
                    seat_map.config.mode.value, seat_map.config.odd_side.value)

        return PipelineResult(
            seat_map=seat_map,
            odd=list(dataset.odd),
            even=list(dataset.even),
            timings={'classify': classify_ms, 'sort': sort_ms, 'seat_map': seat_ms}
        )

    def benchmark(self, dataset: Dataset) -> BenchmarkResult:
        """Time classify + sort on a copy so the caller's dataset is untouched"""
        work = dataset.copy()

        start = time.perf_counter()
        work.classify(self.classifier)
        classify_ms = _elapsed_ms(start)

        start = time.perf_counter()
        work.sort(self.sorter)
        sort_ms = _elapsed_ms(start)

        result = BenchmarkResult(classify_ms=classify_ms, sort_ms=sort_ms)
        logger.info("Benchmark (%s, %s): %s", self.classifier.value, self.sorter.value, result.summary())
        return result
