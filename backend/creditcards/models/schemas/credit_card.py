"""Pydantic schemas for credit card applications and decisions."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from creditcards.core.enums import CreditCardApplicationDecision


# ==================== Application Schemas ====================


class CreditCardApplication(BaseModel):
    """
    Credit card application submitted for evaluation.

    Fields carry no validation constraints; absent values default to
    zero or None and are passed to collaborators exactly as given.
    """

    age: int = 0
    gross_annual_income: Decimal = Decimal("0")
    frequent_flyer_number: Optional[str] = None

    model_config = ConfigDict(frozen=True)


# ==================== Decision Schemas ====================


class DecisionResponse(BaseModel):
    """Schema for a single evaluation outcome."""

    decision: CreditCardApplicationDecision
    validator_lookup_count: int = Field(0, ge=0)


class DecisionSummary(BaseModel):
    """Schema for the outcome of evaluating a batch of applications."""

    results: list[DecisionResponse] = Field(default_factory=list)
    decision_counts: dict[CreditCardApplicationDecision, int] = Field(
        default_factory=dict
    )
    validator_lookup_count: int = Field(0, ge=0)

    @property
    def total_evaluated(self) -> int:
        """Number of applications evaluated."""
        return len(self.results)
