"""
Data Acquisition

Produces raw integer sequences for the pipeline from a delimited file,
from a random generator, or from manually typed text.
"""

import csv
import logging
import re
from pathlib import Path
from typing import List, Optional, Union

import numpy as np

from .dataset import MAX_N, MIN_N
from .errors import CapacityExceeded, InsufficientData

logger = logging.getLogger(__name__)


def _check_count(count: int):
    if count < MIN_N:
        raise InsufficientData(f"At least {MIN_N} values are required, got {count}")
    if count > MAX_N:
        raise CapacityExceeded(f"At most {MAX_N} values are supported, got {count}")


def load_csv(csv_path: Union[str, Path]) -> List[int]:
    """
    Load integers from a comma and/or newline separated file

    Tokens that are not integers are skipped. Reading stops once MAX_N
    values have been collected.

    Args:
        csv_path: Path to the file

    Returns:
        List of integers in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        InsufficientData: If fewer than MIN_N integers were found
    """
    csv_path = Path(csv_path)

    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    values = []
    skipped = 0
    with open(csv_path, 'r', newline='') as f:
        reader = csv.reader(f)
        for row in reader:
            for token in row:
                token = token.strip()
                if not token:
                    continue
                try:
                    values.append(int(token))
                except ValueError:
                    skipped += 1
                    continue
                if len(values) >= MAX_N:
                    break
            if len(values) >= MAX_N:
                logger.warning("Stopped reading %s after %d values", csv_path, MAX_N)
                break

    if skipped:
        logger.debug("Skipped %d non-integer tokens in %s", skipped, csv_path)

    if len(values) < MIN_N:
        raise InsufficientData(f"{csv_path} holds {len(values)} integers, at least {MIN_N} required")

    return values


def generate_random(count: int, low: int, high: int, seed: Optional[int] = None) -> List[int]:
    """
    Draw count uniform integers from [low, high]

    Args:
        count: Number of values, within [MIN_N, MAX_N]
        low: Inclusive lower bound
        high: Inclusive upper bound
        seed: Optional seed for reproducible draws

    Raises:
        InsufficientData / CapacityExceeded: If count is out of bounds
        ValueError: If low > high
    """
    _check_count(count)
    if low > high:
        raise ValueError(f"Lower bound {low} is greater than upper bound {high}")

    rng = np.random.default_rng(seed)
    values = rng.integers(low, high, size=count, endpoint=True)
    return [int(v) for v in values]


def parse_values(text: str) -> List[int]:
    """
    Parse manually entered integers separated by whitespace or commas

    Raises:
        ValueError: If a token is not an integer
        InsufficientData / CapacityExceeded: If the count is out of bounds
    """
    tokens = [t for t in re.split(r'[\s,]+', text.strip()) if t]
    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"Not an integer: {token!r}")

    _check_count(len(values))
    return values
