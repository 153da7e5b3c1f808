"""Decision procedure for credit card applications and its collaborators."""

from .evaluator import CreditCardApplicationEvaluator
from .fraud_lookup import FraudLookup
from .validator import (
    FrequentFlyerNumberValidator,
    LicenseData,
    PatternFrequentFlyerNumberValidator,
    ServiceInformation,
)

__all__ = [
    "CreditCardApplicationEvaluator",
    "FraudLookup",
    "FrequentFlyerNumberValidator",
    "LicenseData",
    "PatternFrequentFlyerNumberValidator",
    "ServiceInformation",
]
