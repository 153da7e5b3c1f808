# tests/test_decision_service.py

import logging

import pytest

from conftest import FakeValidator
from creditcards.core.enums import CreditCardApplicationDecision
from creditcards.core.exceptions import ValidatorNotConfiguredError
from creditcards.models.schemas import CreditCardApplication
from creditcards.services import DecisionService, build_evaluator

Decision = CreditCardApplicationDecision


def test_build_evaluator_wires_validator(fake_validator):
    evaluator = build_evaluator(validator=fake_validator)

    fake_validator.is_valid("q")

    assert evaluator.validator_lookup_count == 1


def test_decide_returns_decision_and_lookup_count(fake_validator):
    service = DecisionService(build_evaluator(validator=fake_validator))

    response = service.decide(
        CreditCardApplication(age=42, gross_annual_income=19_999, frequent_flyer_number="y")
    )

    assert response.decision == Decision.AUTO_DECLINED
    assert response.validator_lookup_count == 1


def test_decide_logs_the_decision(fake_validator, caplog):
    service = DecisionService(build_evaluator(validator=fake_validator))

    with caplog.at_level(logging.INFO, logger="creditcards.services.decision_service"):
        service.decide(CreditCardApplication(age=42, gross_annual_income=150_000))

    assert "AutoAccepted" in caplog.text


def test_decide_logs_and_reraises_fraud_lookup_errors(fake_validator, mock_fraud_lookup, caplog):
    mock_fraud_lookup.is_fraud_risk.side_effect = RuntimeError("fraud service down")
    service = DecisionService(build_evaluator(fake_validator, mock_fraud_lookup))

    with caplog.at_level(logging.ERROR, logger="creditcards.services.decision_service"):
        with pytest.raises(RuntimeError):
            service.decide(CreditCardApplication(age=42))

    assert "fraud service down" in caplog.text


def test_decide_reraises_missing_validator():
    service = DecisionService(build_evaluator())

    with pytest.raises(ValidatorNotConfiguredError):
        service.decide(CreditCardApplication(age=42))


def test_decide_many_counts_each_decision():
    validator = FakeValidator()
    service = DecisionService(build_evaluator(validator=validator))
    applications = [
        CreditCardApplication(age=19),
        CreditCardApplication(age=42, gross_annual_income=100_000),
        CreditCardApplication(age=42, gross_annual_income=19_999, frequent_flyer_number="y"),
        CreditCardApplication(age=30, gross_annual_income=45_000, frequent_flyer_number="z"),
    ]

    summary = service.decide_many(applications)

    assert [r.decision for r in summary.results] == [
        Decision.REFERRED_TO_HUMAN,
        Decision.AUTO_ACCEPTED,
        Decision.AUTO_DECLINED,
        Decision.AUTO_ACCEPTED,
    ]
    assert summary.total_evaluated == 4
    assert summary.decision_counts[Decision.AUTO_ACCEPTED] == 2
    assert summary.decision_counts[Decision.REFERRED_TO_HUMAN_FRAUD_RISK] == 0
    assert summary.validator_lookup_count == 2
    assert [r.validator_lookup_count for r in summary.results] == [0, 0, 1, 2]
    assert validator.numbers_seen == ["y", "z"]


def test_decide_many_with_no_applications(fake_validator):
    summary = DecisionService(build_evaluator(fake_validator)).decide_many([])

    assert summary.total_evaluated == 0
    assert set(summary.decision_counts.values()) == {0}
