"""Utility functions for festreceipt."""

from decimal import Decimal
from functools import cache
import logging
import re
from typing import Any
import qrcode

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r'[\s/\\:*?"<>|]+')


def to_decimal(value: Any) -> Decimal:
    """Convert a numeric value to Decimal, treating None as zero."""
    if value is None:
        return Decimal()
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def group_indian(digits: str) -> str:
    """Group a string of digits the Indian way (12,34,567)."""
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)

    return ",".join(groups) + "," + tail


def format_amount(value: Any) -> str:
    """Format an amount for printing on a receipt.

    Whole rupees print without decimals, paise are kept to two places.
    """
    value = to_decimal(value).quantize(Decimal("0.01"))
    sign = "-" if value < 0 else ""
    integral, _, fraction = f"{abs(value):f}".partition(".")

    text = sign + group_indian(integral)
    if fraction != "00":
        text += "." + fraction
    return text


def format_rupees(value: Any) -> str:
    """Format an amount in the receipt's "Rs. 1,000/-" style."""
    return f"Rs. {format_amount(value)}/-"


def receipt_number(donation_id: str | None) -> str:
    """Derive the printed receipt number from a donation id."""
    return "#" + (donation_id or "")[:8].upper()


def receipt_filename(donor_name: str, donation_id: str | None) -> str:
    """Build the output filename for a donation's receipt.

    Whitespace and path separators in the donor name become underscores, so
    the file always lands directly in the output directory.
    """
    donor = _UNSAFE_FILENAME_CHARS.sub("_", donor_name)
    return f"Receipt_{donor}_{(donation_id or '')[:6]}.pdf"


@cache
def get_qrcode_image(data: str) -> qrcode.image.base.BaseImage:
    """Generate a QR code image for the given data."""
    qr = qrcode.QRCode()
    qr.add_data(data)
    img = qr.make_image()
    return img
