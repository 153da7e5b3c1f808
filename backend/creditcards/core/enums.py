"""Core enums for type safety across the application."""

from enum import Enum


class CreditCardApplicationDecision(str, Enum):
    """Outcome of evaluating a credit card application."""

    AUTO_ACCEPTED = "AutoAccepted"
    AUTO_DECLINED = "AutoDeclined"
    REFERRED_TO_HUMAN = "ReferredToHuman"
    REFERRED_TO_HUMAN_FRAUD_RISK = "ReferredToHumanFraudRisk"


class ValidationMode(str, Enum):
    """Lookup depth requested from the frequent flyer number validator."""

    NONE = "None"
    BASIC = "Basic"
    DETAILED = "Detailed"
