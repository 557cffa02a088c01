"""
Dataset Model

Owns the raw integer sequence together with its derived odd and even
sequences, enforces the capacity bounds and supports incremental insertion
that keeps already sorted partitions in order.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from .classification import ClassificationStrategy, classify, is_odd
from .errors import CapacityExceeded, InsufficientData
from .sorting import SortStrategy, sort_values

logger = logging.getLogger(__name__)

# Bounds on the raw sequence
MIN_N = 20
MAX_N = 1024


@dataclass
class Dataset:
    """
    Raw integers plus their odd/even partitions

    Attributes:
        raw: Values in insertion order
        odd: Odd values, populated by classify()
        even: Even values, populated by classify()
        capacity: Maximum number of raw values
    """
    raw: List[int] = field(default_factory=list)
    odd: List[int] = field(default_factory=list)
    even: List[int] = field(default_factory=list)
    capacity: int = MAX_N

    def __post_init__(self):
        if len(self.raw) > self.capacity:
            raise CapacityExceeded(
                f"Dataset holds {len(self.raw)} values, capacity is {self.capacity}"
            )

    @classmethod
    def from_values(cls, values: Iterable[int], capacity: int = MAX_N) -> 'Dataset':
        """Create a dataset from raw values"""
        return cls(raw=[int(v) for v in values], capacity=capacity)

    def __len__(self) -> int:
        return len(self.raw)

    @property
    def n_odd(self) -> int:
        return len(self.odd)

    @property
    def n_even(self) -> int:
        return len(self.even)

    @property
    def is_full(self) -> bool:
        return len(self.raw) >= self.capacity

    def is_classified(self) -> bool:
        """True when the derived sequences account for every raw value"""
        return len(self.odd) + len(self.even) == len(self.raw)

    def require_minimum(self, minimum: int = MIN_N):
        """Raise InsufficientData when fewer than minimum raw values exist"""
        if len(self.raw) < minimum:
            raise InsufficientData(
                f"At least {minimum} values are required, dataset holds {len(self.raw)}"
            )

    def classify(self, strategy: ClassificationStrategy = ClassificationStrategy.PARTITION):
        """
        Overwrite odd/even from the current raw contents

        Raises:
            InsufficientData: If fewer than MIN_N raw values exist
            CapacityExceeded: If raw somehow grew beyond capacity
        """
        self.require_minimum()
        if len(self.raw) > self.capacity:
            raise CapacityExceeded(
                f"Dataset holds {len(self.raw)} values, capacity is {self.capacity}"
            )

        self.odd, self.even = classify(self.raw, strategy)
        logger.debug("Classified %d values with %s: odd=%d, even=%d",
                     len(self.raw), strategy.value, self.n_odd, self.n_even)

    def sort(self, strategy: SortStrategy = SortStrategy.QUICK):
        """Sort both derived sequences in place"""
        sort_values(self.odd, strategy)
        sort_values(self.even, strategy)

    def insert(self, value: int):
        """
        Append a value, keeping sorted partitions up to date

        When the partitions already cover every raw value, the new value is
        shift-inserted into the matching partition so it stays ascending.
        Otherwise only raw grows and the partitions stay stale until the
        next classify() and sort().

        Raises:
            CapacityExceeded: If the dataset is already full
        """
        if self.is_full:
            raise CapacityExceeded(f"Dataset is full ({self.capacity} values), cannot insert {value}")

        was_classified = self.is_classified()
        self.raw.append(value)

        if was_classified:
            target = self.odd if is_odd(value) else self.even
            _ordered_insert(target, value)
            logger.debug("Inserted %d into %s partition", value, "odd" if is_odd(value) else "even")

    def copy(self) -> 'Dataset':
        """Independent copy of all three sequences"""
        return Dataset(
            raw=list(self.raw),
            odd=list(self.odd),
            even=list(self.even),
            capacity=self.capacity
        )


def _ordered_insert(values: List[int], value: int):
    """Insert value into ascending values by shifting larger ones right"""
    i = len(values)
    values.append(value)
    while i > 0 and values[i - 1] > value:
        values[i] = values[i - 1]
        i -= 1
    values[i] = value


def insert_value(dataset: Dataset, value: int):
    """Module-level form of Dataset.insert"""
    dataset.insert(value)
