"""
Registration API Routes
Athletes register for an event; only confirmed registrations enter the draw.
"""

from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from athlos.database import get_session
from athlos.models.payment import Payment
from athlos.models.registration import Registration, RegistrationStatus
from athlos.services.bracket_generator import BYE_ID_PREFIX

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class RegistrationCreateRequest(BaseModel):
    athlete_id: str
    seed: Optional[int] = None
    club: Optional[str] = None

    @field_validator("athlete_id")
    @classmethod
    def validate_athlete_id(cls, v):
        if not v or not v.strip():
            raise ValueError("athlete_id cannot be empty")
        if v.strip().startswith(BYE_ID_PREFIX):
            raise ValueError(f"athlete_id cannot start with '{BYE_ID_PREFIX}' (reserved for byes)")
        return v.strip()

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v):
        if v is not None and v < 1:
            raise ValueError("seed must be >= 1")
        return v


class RegistrationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_id: str
    athlete_id: str
    seed: Optional[int] = None
    club: Optional[str] = None
    status: RegistrationStatus
    created_at: datetime
    confirmed_at: Optional[datetime] = None


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/events/{event_id}/registrations", response_model=RegistrationResponse, status_code=201)
def create_registration(
    event_id: str, request: RegistrationCreateRequest, session: Session = Depends(get_session)
):
    """
    Register an athlete for an event. New registrations start as pending.

    Constraints:
    - (event_id, athlete_id) must be unique
    """
    registration = Registration(
        event_id=event_id,
        athlete_id=request.athlete_id,
        seed=request.seed,
        club=request.club,
    )

    try:
        session.add(registration)
        session.commit()
        session.refresh(registration)
        return registration
    except IntegrityError:
        session.rollback()
        raise HTTPException(
            status_code=409,
            detail=f"Athlete '{request.athlete_id}' is already registered for event '{event_id}'",
        )


@router.get("/events/{event_id}/registrations", response_model=List[RegistrationResponse])
def list_registrations(event_id: str, session: Session = Depends(get_session)):
    """Registrations for an event in entry order (id ascending)."""
    query = select(Registration).where(Registration.event_id == event_id).order_by(Registration.id)
    return session.exec(query).all()


@router.post("/registrations/{registration_id}/confirm", response_model=RegistrationResponse)
def confirm_registration(registration_id: int, session: Session = Depends(get_session)):
    """Mark a registration confirmed. Confirming twice is a no-op."""
    registration = session.get(Registration, registration_id)
    if not registration:
        raise HTTPException(status_code=404, detail="Registration not found")

    if registration.status != RegistrationStatus.confirmed:
        registration.status = RegistrationStatus.confirmed
        registration.confirmed_at = datetime.now(timezone.utc)
        session.add(registration)
        session.commit()
        session.refresh(registration)

    return registration


@router.delete("/registrations/{registration_id}", status_code=204)
def delete_registration(registration_id: int, session: Session = Depends(get_session)):
    registration = session.get(Registration, registration_id)
    if not registration:
        raise HTTPException(status_code=404, detail="Registration not found")

    for payment in session.exec(select(Payment).where(Payment.registration_id == registration_id)).all():
        session.delete(payment)
    session.delete(registration)
    session.commit()

    return None
