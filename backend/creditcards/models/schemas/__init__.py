"""Pydantic schemas for application input and decision output."""

from creditcards.models.schemas.credit_card import (
    CreditCardApplication,
    DecisionResponse,
    DecisionSummary,
)

__all__ = [
    "CreditCardApplication",
    "DecisionResponse",
    "DecisionSummary",
]
