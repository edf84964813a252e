"""
CyclePool: Hand out prime cycle moduli to choice points.

One pool serves one compilation. Primes are popped from the end of the
table and never handed out twice, except through label sharing.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .errors import PoolExhausted
from .primes import PRIME_TABLE

logger = logging.getLogger(__name__)


class CyclePool:
    """Finite stock of primes plus the label -> prime map for Fixed nodes."""

    def __init__(self, primes: Optional[Iterable[int]] = None):
        """
        Initialize the pool.

        Args:
            primes: Primes to hand out, consumed from the end. Defaults to
                the built-in PRIME_TABLE.
        """
        self._primes: List[int] = list(PRIME_TABLE if primes is None else primes)
        if len(set(self._primes)) != len(self._primes):
            raise ValueError("Cycle primes must be distinct")
        self.labels: Dict[str, int] = {}
        self.allocated = 0

    @property
    def remaining(self) -> int:
        return len(self._primes)

    def allocate(self) -> int:
        """Pop the next prime."""
        if not self._primes:
            raise PoolExhausted(
                f"Out of cycle primes after {self.allocated} allocations"
            )
        self.allocated += 1
        return self._primes.pop()

    def allocate_for_label(self, label: str) -> int:
        """Return the prime cached for ``label``, allocating one on first use."""
        if label in self.labels:
            logger.debug(f"Reusing cycle {self.labels[label]} for label {label!r}")
            return self.labels[label]
        cycle = self.allocate()
        self.labels[label] = cycle
        logger.debug(f"Allocated cycle {cycle} for label {label!r}")
        return cycle
