"""Fraud risk lookup policy."""

from creditcards.models.schemas.credit_card import CreditCardApplication


class FraudLookup:
    """
    Default fraud risk policy, which never reports a risk.

    Deployments substitute their own policy by overriding
    _check_application(), or by passing any object with an
    is_fraud_risk(application) method to the evaluator.
    """

    def is_fraud_risk(self, application: CreditCardApplication) -> bool:
        """
        Check whether an application is a fraud risk.

        Args:
            application: The application being evaluated

        Returns:
            True if the application should be referred as a fraud risk
        """
        return self._check_application(application)

    def _check_application(self, application: CreditCardApplication) -> bool:
        return False
