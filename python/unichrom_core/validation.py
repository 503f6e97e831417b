"""Sanity checks for reconstructed chromosomes."""

from __future__ import annotations

from typing import Iterable


def validate_chromosome(fragments: Iterable[str] | None, chromosome: str | None) -> bool:
    """Return True if every fragment occurs somewhere in ``chromosome``.

    This is necessary for a correct reconstruction but not sufficient.
    """

    if fragments is None or chromosome is None:
        return False
    return all(fragment in chromosome for fragment in fragments)
