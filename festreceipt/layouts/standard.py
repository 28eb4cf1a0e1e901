"""Standard (list) receipt layout."""

from __future__ import annotations

import logging

from festreceipt.config.model import Donation
from festreceipt.domain.payment import PaymentState, describe_contribution
from festreceipt.domain.settings import ResolvedSettings
from festreceipt.pdf import DARK, WHITE, ReceiptPDF
from festreceipt.utils import format_amount, format_rupees, receipt_number
from .common import (
    CONTENT_MARGIN,
    GREEN,
    RED,
    draw_header,
    draw_page_border,
    draw_signature,
    draw_upi_qr,
    format_receipt_date,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Festival Receipt"

DETAILS_Y = 55
STATUS_Y = 65
BODY_Y = 80
FOOTER_Y = 250
QR_Y = 205

AMOUNT_BOX_WIDTH = 80
AMOUNT_BOX_HEIGHT = 25


def render_standard(
    pdf: ReceiptPDF,
    donation: Donation,
    settings: ResolvedSettings,
    state: PaymentState,
) -> None:
    """Draw the standard receipt onto a blank page."""
    theme = settings.theme
    logger.debug(f"Rendering standard layout with the {theme.name} theme.")

    draw_page_border(pdf, theme.primary)
    draw_header(
        pdf,
        theme,
        settings.title or DEFAULT_TITLE,
        settings.sub_title,
        settings.logo_path if settings.show_logo else None,
    )

    _draw_details(pdf, donation, settings)
    _draw_status(pdf, state)
    _draw_body(pdf, donation, settings)
    _draw_footer(pdf, donation, settings, state)


def _draw_details(
    pdf: ReceiptPDF, donation: Donation, settings: ResolvedSettings
) -> None:
    right = pdf.w - CONTENT_MARGIN

    if settings.show_date:
        date_text = format_receipt_date(donation, settings.date_format)
        pdf.draw_text(right, DETAILS_Y, f"Date: {date_text}", size=10, align="R")

    if settings.show_receipt_no:
        pdf.draw_text(
            CONTENT_MARGIN,
            DETAILS_Y,
            f"Receipt No: {receipt_number(donation.id)}",
            size=10,
        )


def _draw_status(pdf: ReceiptPDF, state: PaymentState) -> None:
    """Paid/pending note beside the details. Does not move the body."""
    right = pdf.w - CONTENT_MARGIN

    if state.status == "pending":
        pdf.draw_text(
            right,
            STATUS_Y,
            f"PAYMENT PENDING: {format_rupees(state.due_amount)}",
            size=10,
            style="B",
            color=RED,
            align="R",
        )
    elif state.status == "paid":
        pdf.draw_text(
            right, STATUS_Y, "PAID IN FULL", size=10, style="B", color=GREEN, align="R"
        )


def _draw_body(
    pdf: ReceiptPDF, donation: Donation, settings: ResolvedSettings
) -> None:
    y = BODY_Y

    pdf.draw_text(CONTENT_MARGIN, y, "Received with thanks from:", size=12)
    y += 10

    pdf.draw_text(
        CONTENT_MARGIN,
        y,
        donation.donor_name,
        size=16,
        style="B",
        color=settings.theme.primary,
    )
    y += 20

    pdf.draw_text(
        CONTENT_MARGIN,
        y,
        f"The Sum of Rupees: {format_amount(donation.amount)}/-",
        size=12,
    )
    y += 15

    pdf.draw_text(
        CONTENT_MARGIN, y, f"Towards: {describe_contribution(donation)}", size=12
    )
    y += 20

    pdf.draw_box(
        CONTENT_MARGIN,
        y,
        AMOUNT_BOX_WIDTH,
        AMOUNT_BOX_HEIGHT,
        draw_color=settings.theme.primary,
        fill_color=WHITE,
        width=1,
        radius=3,
    )
    pdf.draw_text(
        CONTENT_MARGIN + AMOUNT_BOX_WIDTH / 2,
        y + 16,
        format_rupees(donation.amount),
        size=18,
        style="B",
        color=DARK,
        align="C",
    )


def _draw_footer(
    pdf: ReceiptPDF,
    donation: Donation,
    settings: ResolvedSettings,
    state: PaymentState,
) -> None:
    draw_signature(
        pdf,
        pdf.w - 60,
        pdf.w - CONTENT_MARGIN,
        line_y=FOOTER_Y - 25,
        label_y=FOOTER_Y - 20,
        size=10,
        style="I",
    )
    pdf.draw_text(pdf.w / 2, FOOTER_Y, settings.footer_text, size=10, align="C")

    draw_upi_qr(pdf, donation, state, settings.upi, CONTENT_MARGIN, QR_Y)
