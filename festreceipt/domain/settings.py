"""Resolve receipt configuration into concrete settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from festreceipt.config.model import DEFAULT_FOOTER_TEXT, ReceiptConfig, UPIConfig
from festreceipt.domain.themes import Theme, resolve_theme

logger = logging.getLogger(__name__)

Layout = Literal["standard", "table"]

LAYOUTS: tuple[Layout, ...] = ("standard", "table")


@dataclass(frozen=True)
class ResolvedSettings:
    """Receipt settings with every fallback applied."""

    layout: Layout
    theme: Theme
    title: str | None
    """None when neither a title nor an organization name is set."""
    sub_title: str | None
    footer_text: str
    show_logo: bool
    show_date: bool
    show_receipt_no: bool
    date_format: str
    logo_path: Path | None = None
    upi: UPIConfig | None = None


def resolve_layout(layout: Any) -> Layout:
    """Return a known layout name, falling back to standard."""
    if isinstance(layout, str) and layout.strip().lower() in LAYOUTS:
        return layout.strip().lower()  # type: ignore[return-value]

    if layout is not None:
        logger.debug(f"Unknown layout {layout!r}, using standard.")
    return "standard"


def resolve_flag(value: Any) -> bool:
    """Only an explicit False turns a flag off."""
    return value is not False


def resolve_settings(config: ReceiptConfig) -> ResolvedSettings:
    """Resolve a receipt config once, before any drawing happens."""
    return ResolvedSettings(
        layout=resolve_layout(config.layout),
        theme=resolve_theme(config.theme),
        title=config.title or config.organization_name or None,
        sub_title=config.sub_title or None,
        footer_text=config.footer_text or DEFAULT_FOOTER_TEXT,
        show_logo=resolve_flag(config.show_logo),
        show_date=resolve_flag(config.show_date),
        show_receipt_no=resolve_flag(config.show_receipt_no),
        date_format=config.date_format,
        logo_path=config.logo_path,
        upi=config.upi,
    )
