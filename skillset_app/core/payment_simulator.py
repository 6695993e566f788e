"""Simulated checkout for paid courses.

Nothing leaves the process: details are validated with the same rules the
checkout form used, then a seeded random source decides whether the
simulated processor declines. No time passes; the delay a real processor
would have taken is only reported on the receipt.
"""

from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from enum import Enum

from skillset_app.constants.catalog_constants import (
    PAYMENT_DELAY_SPREAD_SECONDS,
    PAYMENT_FAILURE_RATE,
    PAYMENT_MIN_DELAY_SECONDS,
)
from skillset_app.core.clock import IdFactory, new_id

logger = logging.getLogger(__name__)

_EXPIRY_PATTERN = re.compile(r"^\d{2}/\d{2}$")


class PaymentError(Exception):
    """Raised when payment details are invalid or the payment is declined."""


class MobileMoneyProvider(str, Enum):
    MTN = "mtn"
    VODAFONE = "vodafone"
    AIRTELTIGO = "airteltigo"


@dataclass(slots=True)
class CardDetails:
    card_number: str
    expiry_date: str
    cvv: str
    cardholder_name: str


@dataclass(slots=True)
class MobileMoneyDetails:
    phone_number: str
    pin: str
    provider: MobileMoneyProvider = MobileMoneyProvider.MTN


@dataclass(slots=True)
class PaymentReceipt:
    reference: str
    course_id: str
    amount: float
    method: str
    processing_delay_seconds: float


def format_card_number(value: str) -> str:
    """Keep digits only and group them in fours (at most 16 digits)."""
    digits = re.sub(r"\D", "", value)
    match = re.search(r"\d{4,16}", digits)
    if not match:
        return digits
    number = match.group(0)
    return " ".join(number[i : i + 4] for i in range(0, len(number), 4))


def format_expiry_date(value: str) -> str:
    digits = re.sub(r"\D", "", value)
    if len(digits) >= 2:
        return f"{digits[:2]}/{digits[2:4]}"
    return digits


def validate_card(details: CardDetails) -> str | None:
    """Return the first validation message, or None when the card looks usable."""
    number = re.sub(r"\s", "", details.card_number)
    if not details.cardholder_name.strip():
        return "Cardholder name is required"
    if len(number) < 13 or len(number) > 19:
        return "Invalid card number"
    if not _EXPIRY_PATTERN.match(details.expiry_date):
        return "Invalid expiry date (MM/YY)"
    if len(details.cvv) < 3 or len(details.cvv) > 4:
        return "Invalid CVV"
    return None


def validate_mobile_money(details: MobileMoneyDetails) -> str | None:
    if len(re.sub(r"\D", "", details.phone_number)) < 10:
        return "Invalid phone number"
    if len(details.pin) != 4 or not details.pin.isdigit():
        return "PIN must be 4 digits"
    return None


class PaymentSimulator:
    """Approves or declines payments using an injected random source."""

    def __init__(
        self,
        rng: random.Random | None = None,
        failure_rate: float = PAYMENT_FAILURE_RATE,
        id_factory: IdFactory = new_id,
    ) -> None:
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("Failure rate must be between 0 and 1.")
        self._rng = rng if rng is not None else random.Random()
        self._failure_rate = failure_rate
        self._id_factory = id_factory

    def process(
        self,
        course_id: str,
        amount: float,
        details: CardDetails | MobileMoneyDetails,
    ) -> PaymentReceipt:
        if isinstance(details, CardDetails):
            method = "card"
            error = validate_card(details)
        else:
            method = f"momo:{details.provider.value}"
            error = validate_mobile_money(details)
        if error is not None:
            raise PaymentError(error)

        delay = PAYMENT_MIN_DELAY_SECONDS + self._rng.random() * PAYMENT_DELAY_SPREAD_SECONDS
        if self._rng.random() < self._failure_rate:
            logger.info("Simulated payment declined for course %s", course_id)
            raise PaymentError("Payment failed. Please try again or use a different payment method.")

        receipt = PaymentReceipt(
            reference=self._id_factory(),
            course_id=course_id,
            amount=amount,
            method=method,
            processing_delay_seconds=delay,
        )
        logger.info("Simulated payment of %.2f accepted for course %s", amount, course_id)
        return receipt
