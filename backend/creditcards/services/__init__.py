"""Service layer for business logic."""

from creditcards.services.decision_service import DecisionService, build_evaluator

__all__ = ["DecisionService", "build_evaluator"]
