"""
Odd/Even Classification

Splits a sequence of integers into an odd subsequence and an even
subsequence. Three interchangeable strategies are provided:

- STABLE: two passes over the input, order preserved within each group
- PARTITION: Lomuto-style in-place partition of a working copy
- TWO_POINTER: converging cursors swapping misplaced values

Parity is decided by the lowest bit. Python integers behave as infinite
two's-complement numbers under bitwise operators, so ``-3 & 1 == 1`` and
negative odd values are classified as odd without any special case.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple

logger = logging.getLogger(__name__)


class ClassificationStrategy(Enum):
    """Available odd/even classification algorithms"""
    STABLE = "stable"
    PARTITION = "partition"
    TWO_POINTER = "two_pointer"


def is_odd(value: int) -> bool:
    """Return True when the lowest bit of value is set"""
    return bool(value & 1)


def classify_stable(raw: Sequence[int]) -> Tuple[List[int], List[int]]:
    """
    Collect odd values, then even values, in two passes

    Relative input order is preserved inside both groups.
    """
    odd = [value for value in raw if is_odd(value)]
    even = [value for value in raw if not is_odd(value)]
    return odd, even


def classify_partition(raw: Sequence[int]) -> Tuple[List[int], List[int]]:
    """
    Partition a working copy so odd values form a contiguous prefix

    Each odd value met during the scan is swapped into the boundary slot,
    which then advances. Order inside each group is not preserved.
    """
    work = list(raw)
    boundary = 0
    for i in range(len(work)):
        if is_odd(work[i]):
            work[i], work[boundary] = work[boundary], work[i]
            boundary += 1

    logger.debug("Partition split: odd=%d, even=%d", boundary, len(work) - boundary)
    return work[:boundary], work[boundary:]


def classify_two_pointer(raw: Sequence[int]) -> Tuple[List[int], List[int]]:
    """
    Converge two cursors from both ends of a working copy

    The left cursor skips odd values, the right cursor skips even values;
    when both stall the two values are swapped. Input that is already
    mostly split needs very few swaps.
    """
    work = list(raw)
    left, right = 0, len(work) - 1

    while left <= right:
        while left <= right and is_odd(work[left]):
            left += 1
        while left <= right and not is_odd(work[right]):
            right -= 1
        if left < right:
            work[left], work[right] = work[right], work[left]

    logger.debug("Two-pointer split: odd=%d, even=%d", left, len(work) - left)
    return work[:left], work[left:]


CLASSIFIERS: Dict[ClassificationStrategy, Callable[[Sequence[int]], Tuple[List[int], List[int]]]] = {
    ClassificationStrategy.STABLE: classify_stable,
    ClassificationStrategy.PARTITION: classify_partition,
    ClassificationStrategy.TWO_POINTER: classify_two_pointer,
}


def classify(raw: Sequence[int],
             strategy: ClassificationStrategy = ClassificationStrategy.PARTITION) -> Tuple[List[int], List[int]]:
    """
    Split raw into (odd, even) using the selected strategy

    Args:
        raw: Integers to classify (left untouched)
        strategy: Classification algorithm to use

    Returns:
        Tuple of new lists (odd, even)
    """
    return CLASSIFIERS[strategy](raw)
