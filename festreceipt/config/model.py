"""Configuration and record models for the festreceipt application."""

import datetime
from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, FilePath, field_validator

DEFAULT_FOOTER_TEXT = "Thank you for your generous contribution!"


class Donation(BaseModel):
    """A single contribution record, as stored by the bookkeeping app."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: str | None = None
    """Opaque record id, used for the receipt number and filename."""

    name: str | None = None
    """Donor name as entered (often Telugu)."""

    name_english: str | None = None
    """Donor name in English, preferred on the receipt."""

    amount: Decimal = Decimal()
    """Total pledged amount, or estimated value for goods and services."""

    received_amount: Decimal | None = None
    """Amount received so far; None when not tracked."""

    category: str = "chanda"
    """Either "chanda" or "sponsorship"."""

    type: str = ""
    """Sponsorship sub-type, or the item/service description."""

    donation_mode: str | None = None
    """One of "cash", "goods" or "service"; None means cash."""

    payment_method: str | None = None

    created_at: datetime.datetime | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _none_type_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def donor_name(self) -> str:
        """Name printed on the receipt."""
        return self.name_english or self.name or "Donor"


class UPIConfig(BaseModel):
    """Configuration settings for UPI balance payments."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    upi_id: str = Field(
        alias="upi-id", pattern=r"^[a-zA-Z0-9.\-_]{2,256}@[a-zA-Z]{2,64}$"
    )
    """UPI ID for receiving payments."""

    payee_name: str | None = Field(default=None, max_length=50, alias="payee-name")
    """Name of the payee for UPI payments."""

    transaction_note: str = Field(
        default="Receipt {RECEIPT_NUMBER}", max_length=50, alias="transaction-note"
    )
    """Transaction note; {RECEIPT_NUMBER} is replaced with the receipt number."""

    bottom_note: str | None = Field(
        default="Scan to pay the balance", max_length=50, alias="bottom-note"
    )
    """Note printed below the QR code, if any."""


class ReceiptConfig(BaseModel):
    """Receipt settings stored per festival. Every field is optional."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str | None = None
    sub_title: str | None = None
    footer_text: str | None = None

    show_logo: bool | None = None
    show_date: bool | None = None
    show_receipt_no: bool | None = None
    """Flags are tri-state: only an explicit False hides the content."""

    layout: str | None = None
    """Either "standard" or "table"; anything else renders as standard."""

    theme: str | None = None
    """One of "saffron", "blue", "green" or "rose"; defaults to saffron."""

    organization_name: str | None = None

    date_format: str = "%d/%m/%Y"
    """Format for the printed date."""

    logo_path: FilePath | None = None
    """Logo drawn in the header when show_logo is not False."""

    upi: UPIConfig | None = None
    """Adds a QR code for paying the balance on pending cash receipts."""

    @field_validator("show_logo", "show_date", "show_receipt_no", mode="before")
    @classmethod
    def _non_bool_flag_is_unset(cls, v: Any) -> bool | None:
        """Treat anything but a real boolean as unset."""
        if isinstance(v, bool):
            return v
        return None

    @field_validator("layout", "theme", mode="before")
    @classmethod
    def _non_str_choice_is_unset(cls, v: Any) -> str | None:
        if isinstance(v, str):
            return v
        return None

    @classmethod
    def from_festival(
        cls,
        settings: Mapping[str, Any] | None,
        festival_name: str | None = None,
    ) -> "ReceiptConfig":
        """Build the config for a festival from its stored receipt settings.

        Stored settings are merged over the defaults. A festival without
        settings gets its own name as the title.
        """
        defaults: dict[str, Any] = {
            "title": "",
            "sub_title": "",
            "footer_text": DEFAULT_FOOTER_TEXT,
            "show_logo": True,
            "show_date": True,
            "show_receipt_no": True,
            "layout": "standard",
            "theme": "saffron",
        }
        if settings:
            merged = {**defaults, **settings}
        else:
            merged = {**defaults, "title": festival_name or ""}

        merged["organization_name"] = festival_name
        return cls.model_validate(merged)


class FontConfig(BaseModel):
    """Custom TrueType fonts, needed for donor names outside Latin-1."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    family: str = Field(default="ReceiptFont", min_length=1)
    regular: FilePath
    bold: FilePath | None = None
    italic: FilePath | None = None
    bold_italic: FilePath | None = Field(default=None, alias="bold-italic")


class _OrganizationConfig(BaseModel):
    """Configuration settings for the organization."""

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, max_length=100)


class _InputConfig(BaseModel):
    """Configuration settings for the donations file."""

    model_config = ConfigDict(frozen=True)

    path: FilePath
    """Excel (.xlsx) or CSV export of donations."""

    sheet: str = "donations"
    """Sheet to read when the input is an Excel workbook."""


class _OutputConfig(BaseModel):
    """Configuration settings for output files."""

    model_config = ConfigDict(frozen=True)

    path: str = "receipts"
    """Directory to save the receipts into."""


class AppConfig(BaseModel):
    """Configuration settings for the festreceipt command line tool."""

    model_config = ConfigDict(frozen=True)

    organization: _OrganizationConfig = _OrganizationConfig()
    """Configuration for the organization."""

    receipt: ReceiptConfig = ReceiptConfig()
    """Receipt settings applied to every donation."""

    fonts: FontConfig | None = None
    """Custom fonts, if any."""

    input: _InputConfig | None = None
    """Donations to generate receipts for."""

    output: _OutputConfig = _OutputConfig()
    """Where to write receipts."""

    def receipt_config(self) -> ReceiptConfig:
        """Receipt settings with the organization name filled in."""
        if self.receipt.organization_name or not self.organization.name:
            return self.receipt
        return self.receipt.model_copy(
            update={"organization_name": self.organization.name}
        )
