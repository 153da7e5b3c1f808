"""Decision service for running the evaluator over applications."""

import logging
from typing import Iterable, Optional

from creditcards.config import Settings
from creditcards.core.enums import CreditCardApplicationDecision
from creditcards.models.schemas.credit_card import (
    CreditCardApplication,
    DecisionResponse,
    DecisionSummary,
)
from creditcards.services.evaluation import (
    CreditCardApplicationEvaluator,
    FraudLookup,
    FrequentFlyerNumberValidator,
)

logger = logging.getLogger(__name__)


def build_evaluator(
    validator: Optional[FrequentFlyerNumberValidator] = None,
    fraud_lookup: Optional[FraudLookup] = None,
    settings: Optional[Settings] = None,
) -> CreditCardApplicationEvaluator:
    """
    Wire an evaluator from its collaborators and settings.

    Args:
        validator: Frequent flyer number validator, if one is available
        fraud_lookup: Fraud risk policy (defaults to FraudLookup())
        settings: Decision thresholds (defaults to the global settings)

    Returns:
        A new CreditCardApplicationEvaluator
    """
    return CreditCardApplicationEvaluator(
        validator=validator,
        fraud_lookup=fraud_lookup,
        settings=settings,
    )


class DecisionService:
    """
    Decision service to orchestrate application evaluation.

    This service:
    - Runs the evaluator for single applications and batches
    - Logs every decision
    - Reports the evaluator's validator lookup count with each result
    - Logs and re-raises errors the evaluator does not contain
    """

    def __init__(self, evaluator: CreditCardApplicationEvaluator):
        """
        Initialize the decision service.

        Args:
            evaluator: Evaluator used for every decision
        """
        self.evaluator = evaluator

    def decide(self, application: CreditCardApplication) -> DecisionResponse:
        """
        Decide a single application.

        Args:
            application: The application to decide

        Returns:
            DecisionResponse with the decision and current lookup count

        Raises:
            Exception: Errors from the fraud lookup or a missing validator
        """
        try:
            decision = self.evaluator.evaluate(application)
        except Exception as e:
            logger.error(f"Evaluation failed: {str(e)}", exc_info=True)
            raise

        logger.info(
            f"Application decided as {decision.value} "
            f"(validator lookups: {self.evaluator.validator_lookup_count})"
        )

        return DecisionResponse(
            decision=decision,
            validator_lookup_count=self.evaluator.validator_lookup_count,
        )

    def decide_many(
        self, applications: Iterable[CreditCardApplication]
    ) -> DecisionSummary:
        """
        Decide a batch of applications in order.

        Args:
            applications: Applications to decide

        Returns:
            DecisionSummary with per-application results and counts per decision
        """
        results = [self.decide(application) for application in applications]

        decision_counts = {decision: 0 for decision in CreditCardApplicationDecision}
        for result in results:
            decision_counts[result.decision] += 1

        logger.info(
            f"Decided {len(results)} applications: "
            + ", ".join(
                f"{decision.value}={count}"
                for decision, count in decision_counts.items()
            )
        )

        return DecisionSummary(
            results=results,
            decision_counts=decision_counts,
            validator_lookup_count=self.evaluator.validator_lookup_count,
        )
