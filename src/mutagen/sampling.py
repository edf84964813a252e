"""
Seed sweeps for previewing and measuring a grammar.

A factory is evaluated over a run of seeds; results are collected into
DataFrames so output variety and weighted-choice bias can be inspected.
"""

import logging
from typing import Callable, Iterable, List, Optional

import numpy as np
import pandas as pd

from .evaluator import GenerationSession, check_seed
from .factory import Factory

logger = logging.getLogger(__name__)


def seed_range(count: int, start_seed: int = 0) -> range:
    """Consecutive seeds ``start_seed .. start_seed + count - 1``."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    check_seed(start_seed)
    return range(start_seed, start_seed + count)


def preview(factory: Factory, count: int = 5, start_seed: int = 0) -> List[str]:
    """Generate ``count`` outputs for consecutive seeds."""
    return [factory(seed) for seed in seed_range(count, start_seed)]


def sample_outputs(
    factory: Factory,
    seeds: Iterable[int],
    fresh: bool = True,
    progress: Optional[Callable[[Iterable[int]], Iterable[int]]] = None,
) -> pd.DataFrame:
    """
    Evaluate ``factory`` for each seed.

    Args:
        factory: Compiled grammar to sample
        seeds: Seeds to evaluate, in order
        fresh: Give each seed its own generation session so earlier calls
            cannot influence shuffle draws
        progress: Optional iterable wrapper (e.g. tqdm) for progress display

    Returns:
        DataFrame with columns: seed, text
    """
    seeds = list(seeds)
    iterator = progress(seeds) if progress else seeds
    texts = []
    for seed in iterator:
        session = GenerationSession() if fresh else None
        texts.append(factory(seed, session=session))
    logger.debug(f"Sampled {len(texts)} outputs")
    # Seeds past the int64 range stay as Python ints in an object column
    int64_max = int(np.iinfo(np.int64).max)
    seed_dtype = np.int64 if all(seed <= int64_max for seed in seeds) else object
    return pd.DataFrame({"seed": np.asarray(seeds, dtype=seed_dtype), "text": texts})


def choice_frequencies(texts: Iterable[str]) -> pd.DataFrame:
    """
    Count how often each distinct text appears.

    Returns:
        DataFrame with columns: text, count, frequency (sorted by count desc)
    """
    series = pd.Series(list(texts), dtype="object")
    if series.empty:
        return pd.DataFrame(columns=["text", "count", "frequency"])
    counts = series.value_counts(sort=True)
    return pd.DataFrame({
        "text": counts.index.tolist(),
        "count": counts.to_numpy(),
        "frequency": counts.to_numpy() / counts.sum(),
    })


def distinct_ratio(texts: Iterable[str]) -> float:
    """Share of outputs that are distinct (1.0 means no duplicates)."""
    texts = list(texts)
    if not texts:
        return 0.0
    return pd.Series(texts, dtype="object").nunique() / len(texts)
