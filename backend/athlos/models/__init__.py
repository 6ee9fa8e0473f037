from athlos.models.payment import Payment, PaymentStatus
from athlos.models.registration import Registration, RegistrationStatus

__all__ = [
    "Payment",
    "PaymentStatus",
    "Registration",
    "RegistrationStatus",
]
