"""Credit card application decisioning."""

from creditcards.core.enums import CreditCardApplicationDecision, ValidationMode
from creditcards.models.schemas import CreditCardApplication
from creditcards.services import DecisionService, build_evaluator
from creditcards.services.evaluation import (
    CreditCardApplicationEvaluator,
    FraudLookup,
    FrequentFlyerNumberValidator,
)

__version__ = "1.0.0"

__all__ = [
    "CreditCardApplication",
    "CreditCardApplicationDecision",
    "CreditCardApplicationEvaluator",
    "DecisionService",
    "FraudLookup",
    "FrequentFlyerNumberValidator",
    "ValidationMode",
    "build_evaluator",
]
