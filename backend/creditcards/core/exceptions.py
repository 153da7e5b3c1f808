"""Exception types raised by the credit card decisioning package."""


class CreditCardError(Exception):
    """Base class for errors raised by this package."""


class ValidatorNotConfiguredError(CreditCardError, ValueError):
    """Raised when an evaluation needs a frequent flyer validator but none was supplied."""
