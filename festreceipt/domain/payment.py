"""Payment state derived from a donation record."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from festreceipt.config.model import Donation
from festreceipt.utils import to_decimal

logger = logging.getLogger(__name__)

Mode = Literal["cash", "goods", "service"]

_MODE_ALIASES: dict[str, Mode] = {
    "cash": "cash",
    "goods": "goods",
    "good": "goods",
    "service": "service",
    "services": "service",
}


@dataclass(frozen=True)
class PaymentState:
    """What a receipt should say about payment.

    The received/due breakdown only exists for cash donations; for goods
    and services those fields stay None.
    """

    mode: Mode
    received_amount: Decimal | None = None
    due_amount: Decimal | None = None
    is_paid_in_full: bool = False

    @property
    def is_cash(self) -> bool:
        return self.mode == "cash"

    @property
    def status(self) -> Literal["paid", "pending"] | None:
        """Paid/pending badge for cash donations with a positive amount."""
        if self.due_amount is None:
            return None
        if self.due_amount > 0:
            return "pending"
        if self.is_paid_in_full:
            return "paid"
        return None


def normalize_mode(donation_mode: str | None) -> Mode:
    """Normalize a stored donation mode; absent means cash."""
    if not donation_mode or not donation_mode.strip():
        return "cash"

    key = donation_mode.strip().lower()
    mode = _MODE_ALIASES.get(key)
    if mode is None:
        logger.warning(f"Unknown donation mode {donation_mode!r}, treating as cash.")
        return "cash"
    return mode


def derive_state(donation: Donation) -> PaymentState:
    """Derive the payment state of a donation."""
    mode = normalize_mode(donation.donation_mode)
    if mode != "cash":
        return PaymentState(mode=mode)

    amount = to_decimal(donation.amount)
    received = to_decimal(donation.received_amount)
    due = max(Decimal(), amount - received)

    return PaymentState(
        mode=mode,
        received_amount=received,
        due_amount=due,
        is_paid_in_full=due == 0 and amount > 0,
    )


def describe_contribution(donation: Donation) -> str:
    """What a cash contribution was made towards."""
    if donation.category == "sponsorship":
        return f"Sponsorship - {donation.type}"
    return "Festival Contribution"
