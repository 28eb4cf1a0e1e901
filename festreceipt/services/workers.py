"""Worker functions for receipt generation (suitable for ProcessPool)."""

from __future__ import annotations

import logging
from ..config.model import Donation, FontConfig, ReceiptConfig
from ..generate import render_receipt

logger = logging.getLogger(__name__)


def render_receipt_pdf(
    donation: Donation,
    config: ReceiptConfig,
    fonts: FontConfig | None = None,
) -> tuple[str, bytes]:
    """Render a single receipt, returning its filename and PDF bytes."""
    logger.debug(f"Generating receipt for donation: {donation.id}")

    filename, pdf = render_receipt(donation, config, fonts)
    return filename, bytes(pdf.output())
