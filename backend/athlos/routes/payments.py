"""
Payment API Routes
A succeeded payment confirms its registration; a failed one leaves it pending.
"""

import logging
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict
from sqlmodel import Session, select

from athlos.database import get_session
from athlos.models.payment import Payment, PaymentStatus
from athlos.models.registration import Registration, RegistrationStatus

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class PaymentAmount(BaseModel):
    amount: float


class PaymentRequest(PaymentAmount):
    registration_id: int


class PaymentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    registration_id: int
    amount: float
    status: PaymentStatus
    created_at: datetime


def record_payment(session: Session, registration_id: int, amount: float) -> Payment:
    """Store a payment attempt and confirm the registration if it succeeded.

    Any positive amount succeeds; zero or negative amounts are recorded as
    failed and do not touch the registration.
    """
    registration = session.get(Registration, registration_id)
    if not registration:
        raise HTTPException(status_code=404, detail="Registration not found")

    status = PaymentStatus.succeeded if amount > 0 else PaymentStatus.failed
    payment = Payment(registration_id=registration_id, amount=amount, status=status)
    session.add(payment)

    if status == PaymentStatus.succeeded and registration.status != RegistrationStatus.confirmed:
        registration.status = RegistrationStatus.confirmed
        registration.confirmed_at = datetime.now(timezone.utc)
        session.add(registration)

    session.commit()
    session.refresh(payment)
    logger.info("Payment %d for registration %d: %s", payment.id, registration_id, status.value)
    return payment


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/payments", response_model=PaymentResponse, status_code=201)
def create_payment(request: PaymentRequest, session: Session = Depends(get_session)):
    return record_payment(session, request.registration_id, request.amount)


@router.post("/registrations/{registration_id}/payments", response_model=PaymentResponse, status_code=201)
def create_registration_payment(
    registration_id: int, request: PaymentAmount, session: Session = Depends(get_session)
):
    return record_payment(session, registration_id, request.amount)


@router.get("/registrations/{registration_id}/payments", response_model=List[PaymentResponse])
def list_registration_payments(registration_id: int, session: Session = Depends(get_session)):
    """Payment attempts for a registration, oldest first."""
    if not session.get(Registration, registration_id):
        raise HTTPException(status_code=404, detail="Registration not found")

    query = select(Payment).where(Payment.registration_id == registration_id).order_by(Payment.id)
    return session.exec(query).all()
