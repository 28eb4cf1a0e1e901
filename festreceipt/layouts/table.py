"""Formal table (ledger box) receipt layout."""

from __future__ import annotations

import logging

from festreceipt.config.model import Donation
from festreceipt.domain.payment import Mode, PaymentState, describe_contribution
from festreceipt.domain.settings import ResolvedSettings
from festreceipt.pdf import BLACK, ReceiptPDF
from festreceipt.utils import format_rupees, receipt_number
from .common import (
    CONTENT_MARGIN,
    RED,
    draw_header,
    draw_page_border,
    draw_signature,
    draw_upi_qr,
    format_receipt_date,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Charitable Donation Receipt"

DATE_Y = 60
DONOR_Y = 80
LEDGER_Y = 100
ROW_HEIGHT = 15
TEXT_OFFSET = 10
"""Baseline of cell text below the top of its row."""

LABEL_WIDTH = 40
AMOUNT_WIDTH = 40
BREAKDOWN_LABEL_WIDTH = 25

LEDGER_ROWS: tuple[tuple[str, Mode], ...] = (
    ("Goods", "goods"),
    ("Services", "service"),
    ("Cash", "cash"),
)


def render_table(
    pdf: ReceiptPDF,
    donation: Donation,
    settings: ResolvedSettings,
    state: PaymentState,
) -> None:
    """Draw the table receipt onto a blank page."""
    theme = settings.theme
    logger.debug(f"Rendering table layout with the {theme.name} theme.")

    draw_page_border(pdf, theme.primary)
    draw_header(
        pdf,
        theme,
        settings.title or DEFAULT_TITLE,
        settings.sub_title,
        settings.logo_path if settings.show_logo else None,
    )

    _draw_details(pdf, donation, settings)

    y = _draw_ledger(pdf, donation, state, LEDGER_Y)
    y = _draw_total(pdf, donation, settings, y)
    if state.is_cash and donation.amount > 0:
        _draw_breakdown(pdf, state, y)

    _draw_footer(pdf, donation, settings, state)


def _draw_details(
    pdf: ReceiptPDF, donation: Donation, settings: ResolvedSettings
) -> None:
    right = pdf.w - CONTENT_MARGIN

    if settings.show_receipt_no:
        pdf.draw_text(
            CONTENT_MARGIN,
            DATE_Y,
            f"Receipt No: {receipt_number(donation.id)}",
            size=12,
        )

    if settings.show_date:
        pdf.draw_text(pdf.w - 80, DATE_Y, "Date:", size=12)
        pdf.draw_line(pdf.w - 65, DATE_Y, right, DATE_Y)
        pdf.draw_text(
            pdf.w - 60,
            DATE_Y - 2,
            format_receipt_date(donation, settings.date_format),
            size=12,
        )

    pdf.draw_text(CONTENT_MARGIN, DONOR_Y, "Received of:", size=12)
    pdf.draw_line(55, DONOR_Y, right, DONOR_Y)
    pdf.draw_text(60, DONOR_Y - 2, donation.donor_name, size=12, style="B")


def _draw_ledger(
    pdf: ReceiptPDF, donation: Donation, state: PaymentState, top: float
) -> float:
    """Goods/Services/Cash grid with only the donation's row filled in.

    Returns the y of the grid's bottom edge.
    """
    left = CONTENT_MARGIN
    right = pdf.w - CONTENT_MARGIN
    bottom = top + ROW_HEIGHT * len(LEDGER_ROWS)

    pdf.draw_line(left, top, right, top, color=BLACK)
    for x in (left, left + LABEL_WIDTH, right - AMOUNT_WIDTH, right):
        pdf.draw_line(x, top, x, bottom, color=BLACK)

    for index, (label, mode) in enumerate(LEDGER_ROWS):
        row_top = top + index * ROW_HEIGHT
        baseline = row_top + TEXT_OFFSET

        row_bottom = row_top + ROW_HEIGHT
        pdf.draw_line(left, row_bottom, right, row_bottom, color=BLACK)
        pdf.draw_text(left + 2, baseline, label, size=12)

        if mode != state.mode:
            continue

        if mode == "cash":
            description = describe_contribution(donation)
        else:
            description = donation.type
        if description:
            pdf.draw_text(left + LABEL_WIDTH + 2, baseline, description, size=12)

        if donation.amount > 0:
            pdf.draw_text(
                right - AMOUNT_WIDTH + 2,
                baseline,
                format_rupees(donation.amount),
                size=12,
                style="B",
            )

    return bottom


def _draw_total(
    pdf: ReceiptPDF, donation: Donation, settings: ResolvedSettings, top: float
) -> float:
    left = CONTENT_MARGIN
    right = pdf.w - CONTENT_MARGIN
    bottom = top + ROW_HEIGHT
    baseline = top + TEXT_OFFSET

    pdf.draw_box(
        right - AMOUNT_WIDTH,
        top,
        AMOUNT_WIDTH,
        ROW_HEIGHT,
        fill_color=settings.theme.light,
    )
    pdf.draw_line(left, bottom, right, bottom, color=BLACK)
    for x in (right - AMOUNT_WIDTH, right):
        pdf.draw_line(x, top, x, bottom, color=BLACK)

    pdf.draw_text(right - 60, baseline, "TOTAL", size=12, style="B")
    if donation.amount > 0:
        pdf.draw_text(
            right - AMOUNT_WIDTH + 2,
            baseline,
            format_rupees(donation.amount),
            size=12,
            style="B",
            color=settings.theme.primary,
        )
    else:
        pdf.draw_text(right - 25, baseline, "-", size=12, style="B")

    return bottom


def _breakdown_row(
    pdf: ReceiptPDF, top: float, label: str, amount: str, **font
) -> float:
    right = pdf.w - CONTENT_MARGIN
    bottom = top + ROW_HEIGHT
    baseline = top + TEXT_OFFSET

    for x in (right - AMOUNT_WIDTH, right):
        pdf.draw_line(x, top, x, bottom, color=BLACK)
    pdf.draw_line(
        right - AMOUNT_WIDTH - BREAKDOWN_LABEL_WIDTH, bottom, right, bottom, color=BLACK
    )

    label_font = {**font, "style": ""}
    pdf.draw_text(
        right - AMOUNT_WIDTH - BREAKDOWN_LABEL_WIDTH + 2,
        baseline,
        label,
        size=10,
        **label_font,
    )
    pdf.draw_text(right - AMOUNT_WIDTH + 2, baseline, amount, size=12, **font)
    return bottom


def _draw_breakdown(pdf: ReceiptPDF, state: PaymentState, top: float) -> float:
    """Received and balance due rows under the total, for cash donations."""
    y = _breakdown_row(pdf, top, "Received:", format_rupees(state.received_amount))

    if state.status == "pending":
        y = _breakdown_row(
            pdf,
            y,
            "Balance Due:",
            format_rupees(state.due_amount),
            style="B",
            color=RED,
        )
    return y


def _draw_footer(
    pdf: ReceiptPDF,
    donation: Donation,
    settings: ResolvedSettings,
    state: PaymentState,
) -> None:
    footer_y = pdf.h - 40

    pdf.draw_text(pdf.w / 2, footer_y - 30, settings.footer_text, size=12, align="C")
    draw_signature(
        pdf,
        pdf.w - 80,
        pdf.w - CONTENT_MARGIN,
        line_y=footer_y - 5,
        label_y=footer_y,
        size=12,
    )

    draw_upi_qr(pdf, donation, state, settings.upi, CONTENT_MARGIN, pdf.h - 75)
