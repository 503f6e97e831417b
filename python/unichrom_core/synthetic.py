"""Synthetic chromosomes and uniquely assemblable fragment sets."""

from __future__ import annotations

import random
from typing import List

NUCLEOTIDES = "ACGT"


def generate_chromosome(n: int, seed: int | None = None) -> str:
    """Create a random sequence of ``n`` nucleotides."""

    rng = random.Random(seed)
    return "".join(rng.choice(NUCLEOTIDES) for _ in range(n))


def _highest_advance(length: int) -> int:
    # keeps the overlap with the next fragment at length // 2 + 2 or more
    return (length + 1) // 2 - 2


def generate_fragments(
    chromosome: str,
    min_fragment_length: int,
    max_fragment_length: int,
    seed: int | None = None,
) -> List[str]:
    """Chop ``chromosome`` into fragments that glue back together uniquely.

    Fragment lengths are drawn from ``[min_fragment_length, max_fragment_length]``
    and fragments are returned in chromosome order. Each fragment starts
    inside the previous one, overlapping it by more than half of the previous
    fragment's length, and ends past it. Fragments two apart never overlap by
    more than half, so the only overlap graph path through all fragments is
    the chromosome order. The last fragment is cut at the end of the
    chromosome and may be shorter.
    """

    if min_fragment_length > max_fragment_length:
        raise ValueError("min_fragment_length must not exceed max_fragment_length")

    lowest_advance = max(1, ((max_fragment_length + 1) // 2) // 2)
    if _highest_advance(min_fragment_length) < lowest_advance:
        raise ValueError(
            f"fragment lengths {min_fragment_length}-{max_fragment_length} are too "
            "far apart to overlap neighbours by more than half without also "
            "overlapping fragments further along"
        )

    rng = random.Random(seed)
    start = 0
    end = min(rng.randint(min_fragment_length, max_fragment_length), len(chromosome))
    fragments = [chromosome[start:end]]

    while end < len(chromosome):
        start += rng.randint(lowest_advance, _highest_advance(end - start))
        length = rng.randint(max(min_fragment_length, end - start + 1), max_fragment_length)
        end = min(start + length, len(chromosome))
        fragments.append(chromosome[start:end])

    return fragments
