"""Generate receipt PDFs for donations."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from festreceipt.config.model import Donation, FontConfig, ReceiptConfig
from festreceipt.domain.payment import PaymentState, derive_state
from festreceipt.domain.settings import Layout, ResolvedSettings, resolve_settings
from festreceipt.layouts.standard import render_standard
from festreceipt.layouts.table import render_table
from festreceipt.pdf import ReceiptPDF
from festreceipt.utils import receipt_filename, receipt_number

logger = logging.getLogger(__name__)

Renderer = Callable[[ReceiptPDF, Donation, ResolvedSettings, PaymentState], None]

RENDERERS: Mapping[Layout, Renderer] = {
    "standard": render_standard,
    "table": render_table,
}


def _as_donation(donation: Donation | Mapping[str, Any]) -> Donation:
    if isinstance(donation, Donation):
        return donation
    return Donation.model_validate(donation)


def _as_config(config: ReceiptConfig | Mapping[str, Any] | None) -> ReceiptConfig:
    if config is None:
        return ReceiptConfig()
    if isinstance(config, ReceiptConfig):
        return config
    return ReceiptConfig.model_validate(config)


def render_receipt(
    donation: Donation | Mapping[str, Any],
    config: ReceiptConfig | Mapping[str, Any] | None = None,
    fonts: FontConfig | None = None,
) -> tuple[str, ReceiptPDF]:
    """Lay out the receipt for a donation on a fresh page.

    Returns the receipt's filename and the drawn page.
    """
    donation = _as_donation(donation)
    settings = resolve_settings(_as_config(config))
    state = derive_state(donation)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Donation: {donation!r}")
        logger.debug(f"Settings: {settings!r}, payment state: {state!r}")

    pdf = ReceiptPDF(fonts=fonts)
    pdf.set_title(f"Receipt {receipt_number(donation.id)}")
    if settings.title:
        pdf.set_author(settings.title)

    RENDERERS[settings.layout](pdf, donation, settings, state)

    return receipt_filename(donation.donor_name, donation.id), pdf


def generate_receipt(
    donation: Donation | Mapping[str, Any],
    config: ReceiptConfig | Mapping[str, Any] | None = None,
    output_dir: str | Path = ".",
    fonts: FontConfig | None = None,
) -> Path:
    """Render a donation's receipt and save it into ``output_dir``."""
    filename, pdf = render_receipt(donation, config, fonts)
    path = pdf.save(output_dir, filename)
    logger.info(f"Receipt saved to {path}")
    return path


def preview_donation() -> Donation:
    """Sample donation used to preview receipt settings."""
    return Donation(
        id="PREVIEW-123456",
        name="John Doe",
        amount=5001,
        type="UPI",
        category="chanda",
        created_at=datetime.datetime.now(),
    )
