"""
Seed normalization for single-elimination draws.

Participants without a seed are seeded by their input position (1-based),
then the whole field is ordered by seed. Ties keep input order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class Participant:
    """One entrant in the draw. Lower seed = stronger."""
    id: str
    seed: Optional[int] = None
    club: Optional[str] = None
    is_bye: bool = False  # only set on synthetic padding entries


def normalize_participants(participants: Sequence[Participant]) -> List[Participant]:
    """Fill missing seeds by input position and return the field in seed order.

    Explicit seeds are kept as given (duplicates, zero or negative values
    included). The input is never mutated; seeded copies are returned.
    """
    seeded = [
        replace(p, seed=p.seed if p.seed is not None else index + 1)
        for index, p in enumerate(participants)
    ]
    # sorted() is stable, so equal seeds stay in input order
    return sorted(seeded, key=lambda p: p.seed)
