"""
Bracket API Routes
Round 1 single-elimination draws. Nothing generated here is stored.
"""

from typing import List, Optional, Sequence, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, field_validator
from sqlmodel import Session, select

from athlos.database import get_session
from athlos.models.registration import Registration, RegistrationStatus
from athlos.services.bracket_generator import BYE_ID_PREFIX, BracketMatch, generate_first_round, next_power_of_two
from athlos.services.seed_normalizer import Participant

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class ParticipantIn(BaseModel):
    id: str
    seed: Optional[int] = None
    club: Optional[str] = None


class FirstRoundRequest(BaseModel):
    # Entries may be full objects or bare ids
    participants: List[Union[ParticipantIn, str]]

    @field_validator("participants")
    @classmethod
    def validate_unique_ids(cls, v):
        ids = [p if isinstance(p, str) else p.id for p in v]
        if len(ids) != len(set(ids)):
            raise ValueError("participant ids must be unique")
        if any(i.startswith(BYE_ID_PREFIX) for i in ids):
            raise ValueError(f"participant ids cannot start with '{BYE_ID_PREFIX}' (reserved for byes)")
        return v


class BracketMatchResponse(BaseModel):
    id: str
    round: int
    red: Optional[str] = None
    blue: Optional[str] = None
    is_bye: bool


class FirstRoundResponse(BaseModel):
    bracket_size: int
    matches: List[BracketMatchResponse]


def _to_response(participant_count: int, matches: Sequence[BracketMatch]) -> FirstRoundResponse:
    return FirstRoundResponse(
        bracket_size=next_power_of_two(participant_count) if participant_count else 0,
        matches=[
            BracketMatchResponse(id=m.id, round=m.round, red=m.red, blue=m.blue, is_bye=m.is_bye)
            for m in matches
        ],
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/brackets/first-round", response_model=FirstRoundResponse)
def build_first_round(request: FirstRoundRequest):
    """Build Round 1 for an ad-hoc participant list."""
    participants = [
        Participant(id=p) if isinstance(p, str) else Participant(id=p.id, seed=p.seed, club=p.club)
        for p in request.participants
    ]
    return _to_response(len(participants), generate_first_round(participants))


@router.get("/events/{event_id}/bracket/first-round", response_model=FirstRoundResponse)
def event_first_round(event_id: str, session: Session = Depends(get_session)):
    """
    Build Round 1 from the event's confirmed registrations.

    Registrations are fed in entry order, so unseeded athletes are seeded
    by when they registered.
    """
    query = (
        select(Registration)
        .where(Registration.event_id == event_id)
        .where(Registration.status == RegistrationStatus.confirmed)
        .order_by(Registration.id)
    )
    registrations = session.exec(query).all()

    participants = [Participant(id=r.athlete_id, seed=r.seed, club=r.club) for r in registrations]
    return _to_response(len(participants), generate_first_round(participants))
