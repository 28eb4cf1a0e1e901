"""Printable donation receipts for festival bookkeeping."""

from festreceipt.config.model import Donation, ReceiptConfig
from festreceipt.domain.payment import PaymentState, derive_state
from festreceipt.domain.themes import Theme, resolve_theme
from festreceipt.generate import generate_receipt, preview_donation, render_receipt

__all__ = [
    "Donation",
    "PaymentState",
    "ReceiptConfig",
    "Theme",
    "derive_state",
    "generate_receipt",
    "preview_donation",
    "render_receipt",
    "resolve_theme",
]
