"""Drawing blocks shared by both receipt layouts."""

from __future__ import annotations

import datetime
import logging
from pathlib import Path
from urllib.parse import quote

from festreceipt.config.model import Donation, UPIConfig
from festreceipt.domain.payment import PaymentState
from festreceipt.domain.themes import Theme
from festreceipt.pdf import DARK, ReceiptPDF
from festreceipt.utils import get_qrcode_image, receipt_number

logger = logging.getLogger(__name__)

CONTENT_MARGIN = 25
"""Left/right inset of body content from the page edge."""

HEADER_TOP = 10
HEADER_BOTTOM = 45
TITLE_Y = 25
SUB_TITLE_Y = 35

QR_SIZE = 30

RED = (220, 38, 38)
GREEN = (22, 163, 74)


def draw_page_border(pdf: ReceiptPDF, color: tuple[int, int, int]) -> None:
    """Double decorative border inset 5 and 7 from each edge."""
    for inset in (5, 7):
        pdf.draw_box(
            inset,
            inset,
            pdf.w - 2 * inset,
            pdf.h - 2 * inset,
            draw_color=color,
            width=1,
        )


def draw_header(
    pdf: ReceiptPDF,
    theme: Theme,
    title: str,
    sub_title: str | None = None,
    logo_path: Path | None = None,
) -> None:
    """Filled header block with the centred title and optional sub title."""
    pdf.draw_box(
        HEADER_TOP,
        HEADER_TOP,
        pdf.w - 2 * HEADER_TOP,
        HEADER_BOTTOM - HEADER_TOP,
        draw_color=theme.primary,
        fill_color=theme.light,
        width=1,
    )

    if logo_path:
        size = HEADER_BOTTOM - HEADER_TOP - 4
        pdf.draw_image(logo_path, HEADER_TOP + 2, HEADER_TOP + 2, size, size)

    pdf.draw_text(
        pdf.w / 2, TITLE_Y, title, size=22, style="B", color=theme.primary, align="C"
    )

    if sub_title:
        pdf.draw_text(pdf.w / 2, SUB_TITLE_Y, sub_title, size=12, align="C")


def draw_signature(
    pdf: ReceiptPDF, x1: float, x2: float, line_y: float, label_y: float, **font
) -> None:
    """Ruled signature line with the "Authorized Signature" label under it."""
    pdf.draw_text(x1, label_y, "Authorized Signature", **font)
    pdf.draw_line(x1, line_y, x2, line_y, color=DARK, width=0.5)


def format_receipt_date(donation: Donation, date_format: str) -> str:
    """Printed date: the donation's creation date in local time, else today."""
    created = donation.created_at
    if created is None:
        return datetime.date.today().strftime(date_format)
    if created.tzinfo is not None:
        created = created.astimezone()
    return created.strftime(date_format)


def get_upi_link(upi: UPIConfig, donation: Donation, state: PaymentState) -> str:
    """UPI payment link for the balance due on a donation."""
    note = upi.transaction_note.format(RECEIPT_NUMBER=receipt_number(donation.id))
    payee = upi.payee_name or ""
    return (
        f"upi://pay?pa={upi.upi_id}&pn={quote(payee)}"
        f"&am={state.due_amount}&cu=INR&tn={quote(note)}"
    )


def draw_upi_qr(
    pdf: ReceiptPDF,
    donation: Donation,
    state: PaymentState,
    upi: UPIConfig | None,
    x: float,
    y: float,
) -> None:
    """QR code for paying the balance, only on pending cash receipts."""
    if upi is None or state.status != "pending":
        return

    link = get_upi_link(upi, donation, state)
    logger.debug(f"Adding UPI QR code: {link}")
    img = get_qrcode_image(link)
    pdf.draw_image(img.get_image(), x, y, QR_SIZE, QR_SIZE, source=link)

    if upi.bottom_note:
        pdf.draw_text(x, y + QR_SIZE + 4, upi.bottom_note, size=8)
