"""Frequent flyer number validator contract and a pattern-based implementation."""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional

from creditcards.config import settings
from creditcards.core.enums import ValidationMode

logger = logging.getLogger(__name__)

LookupListener = Callable[[], None]


@dataclass(frozen=True)
class LicenseData:
    """License issued for the validator service."""

    license_key: str


@dataclass(frozen=True)
class ServiceInformation:
    """Status information published by the validator service."""

    license: LicenseData


class FrequentFlyerNumberValidator(ABC):
    """
    Abstract base class for frequent flyer number validators.

    Implementations provide the validity check and the service
    information; this base class holds the validation mode and the
    listeners notified each time a lookup is performed.

    Subclasses must call _on_lookup_performed() once for every lookup
    they carry out, from within is_valid().
    """

    def __init__(self):
        """Initialize with no validation mode and no listeners."""
        self.validation_mode: ValidationMode = ValidationMode.NONE
        self._lookup_listeners: List[LookupListener] = []

    @property
    @abstractmethod
    def service_information(self) -> ServiceInformation:
        """Service status, including the license the evaluator checks."""

    @abstractmethod
    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        """
        Check whether a frequent flyer number is valid.

        Args:
            frequent_flyer_number: Number to check, exactly as supplied

        Returns:
            True if the number is valid

        Raises:
            Exception: Any lookup failure
        """

    def add_lookup_listener(self, listener: LookupListener) -> None:
        """
        Register a callback fired each time a lookup is performed.

        Args:
            listener: Zero-argument callable
        """
        self._lookup_listeners.append(listener)

    def remove_lookup_listener(self, listener: LookupListener) -> None:
        """Unregister a previously added callback."""
        self._lookup_listeners.remove(listener)

    def _on_lookup_performed(self) -> None:
        """Notify listeners, in registration order, that a lookup happened."""
        for listener in list(self._lookup_listeners):
            listener()


class PatternFrequentFlyerNumberValidator(FrequentFlyerNumberValidator):
    """
    Validator accepting numbers that contain a match for a regular expression.

    Every call to is_valid() is one lookup, including calls with no number.
    """

    def __init__(
        self,
        pattern: Optional[str] = None,
        license_key: Optional[str] = None,
    ):
        """
        Initialize the validator.

        Args:
            pattern: Regular expression searched for in the number;
                defaults to settings.FREQUENT_FLYER_NUMBER_PATTERN
            license_key: License key reported in the service information;
                defaults to settings.VALID_LICENSE_KEY
        """
        super().__init__()
        self._pattern = re.compile(pattern or settings.FREQUENT_FLYER_NUMBER_PATTERN)
        self._service_information = ServiceInformation(
            license=LicenseData(
                license_key=(
                    license_key
                    if license_key is not None
                    else settings.VALID_LICENSE_KEY
                )
            )
        )

    @property
    def service_information(self) -> ServiceInformation:
        return self._service_information

    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        logger.debug(
            f"Frequent flyer lookup ({self.validation_mode.value}) "
            f"for {frequent_flyer_number!r}"
        )
        self._on_lookup_performed()

        if frequent_flyer_number is None:
            return False

        return self._pattern.search(frequent_flyer_number) is not None
