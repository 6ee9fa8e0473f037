"""
Single-elimination Round 1 generation.

The seeded field is padded with byes up to the next power of two, then
adjacent slots are paired: (slot 1 v slot 2), (slot 3 v slot 4), ...

Byes go to the top seeds, one per match: seed 1 meets a bye, seed 2 meets
a bye, and so on until the byes run out. The rest of the field pairs by seed
adjacency. There is no cross-seeding (1v16, 2v15) among the real pairs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from athlos.services.seed_normalizer import Participant, normalize_participants

logger = logging.getLogger(__name__)

BYE_ID_PREFIX = "bye-"
FIRST_ROUND = 1


@dataclass(frozen=True)
class BracketMatch:
    id: str
    round: int
    red: Optional[str]
    blue: Optional[str]
    is_bye: bool


def next_power_of_two(value: int) -> int:
    """Smallest power of two >= value; 1 for anything below 1."""
    if value < 1:
        return 1
    return 1 << (value - 1).bit_length()


def _make_bye(position: int) -> Participant:
    return Participant(id=f"{BYE_ID_PREFIX}{position}", is_bye=True)


def pad_with_byes(field: Sequence[Participant], size: int) -> List[Participant]:
    """Slot the seeded *field* into a bracket of *size*.

    Each bye is placed directly after one of the top seeds. Bye ids carry
    their 1-based slot position (bye-2, bye-4, ...).
    """
    bye_count = max(size - len(field), 0)
    padded: List[Participant] = []
    for index, participant in enumerate(field):
        padded.append(participant)
        if index < bye_count:
            padded.append(_make_bye(len(padded) + 1))
    # Only reachable if size > 2 * len(field)
    while len(padded) < size:
        padded.append(_make_bye(len(padded) + 1))
    return padded


def generate_first_round(participants: Sequence[Participant]) -> List[BracketMatch]:
    """Build the Round 1 matches for *participants*.

    Empty input gives no matches. A lone participant gets a single bye
    match with no blue corner.
    """
    field = normalize_participants(participants)
    if not field:
        return []

    bracket_size = next_power_of_two(len(field))
    slots = pad_with_byes(field, bracket_size)

    matches: List[BracketMatch] = []
    for index in range(0, len(slots), 2):
        red = slots[index]
        # A one-slot bracket has no blue corner
        blue = slots[index + 1] if index + 1 < len(slots) else None
        matches.append(BracketMatch(
            id=f"M{len(matches) + 1}",
            round=FIRST_ROUND,
            red=red.id,
            blue=blue.id if blue is not None else None,
            is_bye=blue is None or blue.is_bye,
        ))

    logger.debug(
        "Round 1 generated: %d entrants, bracket size %d, %d matches, %d byes",
        len(field), bracket_size, len(matches), sum(1 for m in matches if m.is_bye),
    )
    return matches
