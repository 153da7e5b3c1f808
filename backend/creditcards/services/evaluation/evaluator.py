"""Credit card application evaluator."""

import logging
from typing import Optional

from creditcards.config import Settings, settings as default_settings
from creditcards.core.enums import CreditCardApplicationDecision, ValidationMode
from creditcards.core.exceptions import ValidatorNotConfiguredError
from creditcards.models.schemas.credit_card import CreditCardApplication
from creditcards.services.evaluation.fraud_lookup import FraudLookup
from creditcards.services.evaluation.validator import FrequentFlyerNumberValidator

logger = logging.getLogger(__name__)


class CreditCardApplicationEvaluator:
    """
    Decides credit card applications.

    Checks run in a fixed order:
    - Young applicants are referred to a human
    - Fraud risks are referred to a human as fraud risk
    - High income applications are accepted without a validator lookup
    - The validator's mode is set from the applicant's age
    - An unlicensed validator, an invalid number or a failing lookup
      refers the application to a human
    - Low income applications are declined, the rest accepted

    The evaluator counts every lookup its validator reports. The counter
    is never reset.
    """

    def __init__(
        self,
        validator: Optional[FrequentFlyerNumberValidator] = None,
        fraud_lookup: Optional[FraudLookup] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the evaluator.

        Args:
            validator: Frequent flyer number validator; only required for
                applications that get past the high income check
            fraud_lookup: Fraud risk policy (defaults to FraudLookup())
            settings: Decision thresholds (defaults to the global settings)
        """
        self._validator = validator
        self._fraud_lookup = fraud_lookup if fraud_lookup is not None else FraudLookup()
        self._settings = settings or default_settings
        self._validator_lookup_count = 0

        if self._validator is not None:
            self._validator.add_lookup_listener(self._on_validator_lookup_performed)

    @property
    def validator_lookup_count(self) -> int:
        """Number of lookups the validator has reported."""
        return self._validator_lookup_count

    def evaluate(
        self, application: CreditCardApplication
    ) -> CreditCardApplicationDecision:
        """
        Evaluate an application.

        Args:
            application: The application to decide

        Returns:
            The decision for the application

        Raises:
            ValidatorNotConfiguredError: If a validator lookup is needed
                but no validator was supplied
            Exception: Anything raised by the fraud lookup
        """
        if application.age < self._settings.YOUNG_APPLICANT_AGE:
            logger.debug(f"Applicant aged {application.age} referred as young")
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN

        if self._fraud_lookup.is_fraud_risk(application):
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN_FRAUD_RISK

        if application.gross_annual_income >= self._settings.HIGH_INCOME_THRESHOLD:
            return CreditCardApplicationDecision.AUTO_ACCEPTED

        validator = self._require_validator()

        validator.validation_mode = (
            ValidationMode.DETAILED
            if application.age >= self._settings.DETAILED_LOOKUP_AGE
            else ValidationMode.BASIC
        )

        license_key = validator.service_information.license.license_key
        if license_key != self._settings.VALID_LICENSE_KEY:
            logger.debug(f"Validator license key {license_key!r} not accepted")
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN

        try:
            is_valid_frequent_flyer_number = validator.is_valid(
                application.frequent_flyer_number
            )
        except Exception:
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN

        if not is_valid_frequent_flyer_number:
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN

        if application.gross_annual_income < self._settings.LOW_INCOME_THRESHOLD:
            return CreditCardApplicationDecision.AUTO_DECLINED

        return CreditCardApplicationDecision.AUTO_ACCEPTED

    def _require_validator(self) -> FrequentFlyerNumberValidator:
        if self._validator is None:
            raise ValidatorNotConfiguredError(
                "A frequent flyer number validator is required to evaluate "
                "applications below the high income threshold"
            )
        return self._validator

    def _on_validator_lookup_performed(self) -> None:
        self._validator_lookup_count += 1
