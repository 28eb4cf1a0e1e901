"""PDF surface that receipts are drawn on."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import Any, Literal

from fpdf import FPDF

from festreceipt.config.model import FontConfig
from festreceipt.io.files import write_pdf

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]
Align = Literal["L", "C", "R"]

DARK: RGB = (50, 50, 50)
WHITE: RGB = (255, 255, 255)
BLACK: RGB = (0, 0, 0)

FONTS_DIR = Path(__file__).parent / "fonts"
BUNDLED_FAMILY = "NotoSans"
TELUGU_FAMILY = "NotoSansTelugu"

_BUNDLED_FONTS = {
    (BUNDLED_FAMILY, ""): "NotoSans-Regular.ttf",
    (BUNDLED_FAMILY, "B"): "NotoSans-Bold.ttf",
    (BUNDLED_FAMILY, "I"): "NotoSans-Italic.ttf",
    (BUNDLED_FAMILY, "BI"): "NotoSans-BoldItalic.ttf",
    (TELUGU_FAMILY, ""): "NotoSansTelugu-Regular.ttf",
    (TELUGU_FAMILY, "B"): "NotoSansTelugu-Bold.ttf",
}


@cache
def bundled_fonts_available() -> bool:
    """Whether the Noto fonts shipped with the package are installed."""
    missing = [f for f in _BUNDLED_FONTS.values() if not (FONTS_DIR / f).is_file()]
    if missing:
        logger.warning(
            f"Bundled fonts missing from {FONTS_DIR}: {', '.join(missing)}. "
            "Only Latin-1 text can be printed."
        )
    return not missing


@dataclass(frozen=True)
class TextItem:
    x: float
    y: float
    text: str
    size: float
    style: str
    color: RGB
    align: Align


@dataclass(frozen=True)
class LineItem:
    x1: float
    y1: float
    x2: float
    y2: float
    color: RGB
    width: float


@dataclass(frozen=True)
class BoxItem:
    x: float
    y: float
    w: float
    h: float
    style: str
    draw_color: RGB | None
    fill_color: RGB | None
    width: float
    radius: float


@dataclass(frozen=True)
class ImageItem:
    x: float
    y: float
    w: float
    h: float
    source: str
    link: str


Primitive = TextItem | LineItem | BoxItem | ImageItem


class ReceiptPDF(FPDF):
    """Single A4 page of absolutely positioned primitives.

    Every primitive drawn through the ``draw_*`` methods is also kept in
    ``primitives``, in drawing order.
    """

    def __init__(
        self,
        fonts: FontConfig | None = None,
        orientation="portrait",
        unit="mm",
        format="A4",
    ):
        """Initialize the page with the bundled fonts, or custom ones if given."""
        super().__init__(orientation, unit, format)

        self.font_name = "helvetica"
        if bundled_fonts_available():
            self._add_bundled_fonts()
        if fonts:
            self._add_fonts(fonts)

        self.set_auto_page_break(False)
        self.set_creator("festreceipt")
        self.set_lang("en-IN")

        self.primitives: list[Primitive] = []
        self.add_page()

    def _add_bundled_fonts(self) -> None:
        logger.debug("Adding bundled fonts.")

        for (family, style), filename in _BUNDLED_FONTS.items():
            self.add_font(family, style, FONTS_DIR / filename)

        # Telugu names are drawn from the fallback in any style
        self.set_fallback_fonts([TELUGU_FAMILY], exact_match=False)
        self.set_text_shaping(True)
        self.font_name = BUNDLED_FAMILY

    def _add_fonts(self, fonts: FontConfig) -> None:
        logger.info(f"Adding font family {fonts.family}.")

        self.add_font(fonts.family, "", fonts.regular)
        # Missing styles fall back to the regular face
        self.add_font(fonts.family, "B", fonts.bold or fonts.regular)
        self.add_font(fonts.family, "I", fonts.italic or fonts.regular)
        self.add_font(
            fonts.family, "BI", fonts.bold_italic or fonts.bold or fonts.regular
        )

        self.set_text_shaping(True)
        self.font_name = fonts.family

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        *,
        size: float,
        style: str = "",
        color: RGB = DARK,
        align: Align = "L",
    ) -> None:
        """Draw text with its baseline at y, anchored at x by ``align``."""
        self.set_font(self.font_name, style=style, size=size)
        self.set_text_color(*color)

        left = x
        if align != "L":
            width = self.get_string_width(text)
            left = x - width / 2 if align == "C" else x - width

        self.text(left, y, text)
        self.primitives.append(TextItem(x, y, text, size, style, color, align))

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        color: RGB = DARK,
        width: float = 0.3,
    ) -> None:
        """Draw a straight line."""
        self.set_draw_color(*color)
        self.set_line_width(width)
        self.line(x1, y1, x2, y2)
        self.primitives.append(LineItem(x1, y1, x2, y2, color, width))

    def draw_box(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        *,
        draw_color: RGB | None = None,
        fill_color: RGB | None = None,
        width: float = 0.3,
        radius: float = 0,
    ) -> None:
        """Draw a rectangle, outlined and/or filled, optionally rounded."""
        style = ""
        if draw_color is not None:
            self.set_draw_color(*draw_color)
            self.set_line_width(width)
            style += "D"
        if fill_color is not None:
            self.set_fill_color(*fill_color)
            style += "F"
        if not style:
            raise ValueError("A box needs a draw colour, a fill colour or both.")

        self.rect(
            x,
            y,
            w,
            h,
            style=style,
            round_corners=radius > 0,
            corner_radius=radius,
        )
        self.primitives.append(
            BoxItem(x, y, w, h, style, draw_color, fill_color, width, radius)
        )

    def draw_image(
        self,
        image: Any,
        x: float,
        y: float,
        w: float,
        h: float,
        *,
        source: str = "",
        link: str = "",
    ) -> None:
        """Place an image (path or PIL image) in a fixed box."""
        self.image(image, x=x, y=y, w=w, h=h, link=link)
        self.primitives.append(
            ImageItem(x, y, w, h, source or str(image), link)
        )

    def texts(self) -> list[str]:
        """Text drawn on the page, in drawing order."""
        return [p.text for p in self.primitives if isinstance(p, TextItem)]

    def find_text(self, text: str) -> TextItem | None:
        """First text primitive with exactly this text."""
        for p in self.primitives:
            if isinstance(p, TextItem) and p.text == text:
                return p
        return None

    def save(self, directory: str | Path, filename: str) -> Path:
        """Write the page to ``directory/filename``."""
        path = Path(directory) / filename
        logger.debug(f"Saving receipt to {path}")
        write_pdf(path, self.output())
        return path
