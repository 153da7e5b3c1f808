"""Shared fixtures and test doubles for the decisioning tests."""

from typing import List, Optional
from unittest.mock import MagicMock

import pytest

from creditcards.core.enums import ValidationMode
from creditcards.services.evaluation import (
    FraudLookup,
    FrequentFlyerNumberValidator,
    LicenseData,
    ServiceInformation,
)


class FakeValidator(FrequentFlyerNumberValidator):
    """Validator double that records calls and reports one lookup per call."""

    def __init__(self, license_key: str = "OK", result: bool = True, error: Optional[Exception] = None):
        super().__init__()
        self.license_key = license_key
        self.result = result
        self.error = error
        self.numbers_seen: List[Optional[str]] = []
        self.modes_seen: List[ValidationMode] = []

    @property
    def service_information(self) -> ServiceInformation:
        return ServiceInformation(license=LicenseData(license_key=self.license_key))

    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        self.numbers_seen.append(frequent_flyer_number)
        self.modes_seen.append(self.validation_mode)
        self._on_lookup_performed()
        if self.error is not None:
            raise self.error
        return self.result


class AlwaysFraudLookup(FraudLookup):
    def _check_application(self, application):
        return True


@pytest.fixture
def fake_validator():
    return FakeValidator()


@pytest.fixture
def mock_validator():
    """Mock validator with a valid license that accepts every number."""
    validator = MagicMock(spec=FrequentFlyerNumberValidator)
    validator.service_information.license.license_key = "OK"
    validator.is_valid.return_value = True
    return validator


@pytest.fixture
def mock_fraud_lookup():
    fraud_lookup = MagicMock(spec=FraudLookup)
    fraud_lookup.is_fraud_risk.return_value = False
    return fraud_lookup
