"""Tests for the standard receipt layout."""

from typing import Any

from PIL import Image

from festreceipt.generate import render_receipt
from festreceipt.layouts.common import GREEN, RED
from festreceipt.layouts.standard import BODY_Y, STATUS_Y
from festreceipt.pdf import BoxItem, ImageItem, TextItem


def _donation(**overrides: Any) -> dict[str, Any]:
    """Create a donation record with sensible defaults."""
    donation = {
        "id": "a1b2c3d4-e5f6-7890",
        "name": "రవి కుమార్",
        "name_english": "Ravi Kumar",
        "amount": 5001,
        "received_amount": 5001,
        "category": "chanda",
        "type": "చందా",
        "donation_mode": "cash",
        "created_at": "2024-10-12T12:00:00",
    }
    donation.update(overrides)
    return donation


def _render(donation: dict[str, Any], config: dict[str, Any] | None = None):
    _, pdf = render_receipt(donation, {"layout": "standard", **(config or {})})
    return pdf


class TestStandardLayout:
    """Tests for the standard layout's content."""

    def test_paid_in_full(self):
        """Scenario: a fully received cash donation is marked paid."""
        pdf = _render(_donation())
        status = pdf.find_text("PAID IN FULL")
        assert status is not None
        assert status.color == GREEN
        assert status.align == "R"
        assert status.y == STATUS_Y
        assert not any(t.startswith("PAYMENT PENDING") for t in pdf.texts())

    def test_pending(self):
        """Scenario: a partly received cash donation shows the due amount."""
        pdf = _render(_donation(amount=10000, received_amount=4000))
        status = pdf.find_text("PAYMENT PENDING: Rs. 6,000/-")
        assert status is not None
        assert status.color == RED
        assert status.style == "B"
        assert "PAID IN FULL" not in pdf.texts()

    def test_status_does_not_move_body(self):
        """The body starts at the same place with or without a status."""
        with_status = _render(_donation())
        without_status = _render(_donation(donation_mode="goods"))

        for pdf in (with_status, without_status):
            label = pdf.find_text("Received with thanks from:")
            assert label is not None
            assert label.y == BODY_Y

    def test_no_status_for_zero_amount_or_goods(self):
        """Zero-value and non-cash donations get no status line."""
        for donation in (
            _donation(amount=0, received_amount=0),
            _donation(donation_mode="goods", type="Rice 25kg"),
            _donation(donation_mode="service", type="Sound system"),
        ):
            texts = _render(donation).texts()
            assert "PAID IN FULL" not in texts
            assert not any(t.startswith("PAYMENT PENDING") for t in texts)

    def test_body_content(self):
        """Donor, amount in words line, description and amount box."""
        pdf = _render(_donation(amount=100000, received_amount=100000))
        texts = pdf.texts()

        donor = pdf.find_text("Ravi Kumar")
        assert donor is not None
        assert donor.style == "B"
        assert donor.size == 16
        assert "The Sum of Rupees: 1,00,000/-" in texts
        assert "Towards: Festival Contribution" in texts
        assert "Rs. 1,00,000/-" in texts

        rounded = [p for p in pdf.primitives if isinstance(p, BoxItem) and p.radius]
        assert len(rounded) == 1
        assert rounded[0].fill_color == (255, 255, 255)

    def test_sponsorship_description(self):
        """Sponsorships name the sponsored item."""
        pdf = _render(_donation(category="sponsorship", type="Day1-Meals"))
        assert "Towards: Sponsorship - Day1-Meals" in pdf.texts()

    def test_donor_name_fallbacks(self):
        """English name, then name, then "Donor"."""
        pdf = _render(_donation(name_english=None, name="Sita"))
        assert pdf.find_text("Sita") is not None

        pdf = _render(_donation(name_english=None, name=None))
        assert pdf.find_text("Donor") is not None

    def test_date_and_receipt_number(self):
        """Date and receipt number are shown by default."""
        texts = _render(_donation()).texts()
        assert "Date: 12/10/2024" in texts
        assert "Receipt No: #A1B2C3D4" in texts

    def test_date_and_receipt_number_hidden(self):
        """Explicit False hides the date and receipt number."""
        texts = _render(
            _donation(), {"show_date": False, "show_receipt_no": False}
        ).texts()
        assert not any(t.startswith("Date:") for t in texts)
        assert not any(t.startswith("Receipt No:") for t in texts)

    def test_default_title_and_footer(self):
        """Scenario: an empty config uses the generic title and footer."""
        _, pdf = render_receipt(_donation(), {})
        title = pdf.find_text("Festival Receipt")
        assert title is not None
        assert title.size == 22
        assert title.align == "C"
        assert "Thank you for your generous contribution!" in pdf.texts()

    def test_title_and_sub_title(self):
        """Configured title and sub title are printed in the header."""
        pdf = _render(
            _donation(),
            {
                "title": "Ganesh Utsav",
                "sub_title": "Yuva Mandali",
                "footer_text": "Jai Ganesh",
            },
        )
        texts = pdf.texts()
        assert texts[:2] == ["Ganesh Utsav", "Yuva Mandali"]
        assert "Jai Ganesh" in texts

    def test_invalid_theme_uses_saffron(self):
        """Scenario: an unknown theme renders with saffron colours."""
        pdf = _render(_donation(), {"theme": "purple"})
        title = pdf.find_text("Festival Receipt")
        assert title is not None
        assert title.color == (255, 153, 51)

        header = [
            p
            for p in pdf.primitives
            if isinstance(p, BoxItem) and p.fill_color == (255, 245, 230)
        ]
        assert len(header) == 1

    def test_themed_border(self):
        """Both border rectangles use the theme's primary colour."""
        pdf = _render(_donation(), {"theme": "green"})
        borders = [
            p for p in pdf.primitives if isinstance(p, BoxItem) and p.x in (5, 7)
        ]
        assert len(borders) == 2
        assert all(p.draw_color == (5, 150, 105) for p in borders)

    def test_upi_qr_only_when_pending(self):
        """The balance QR code is drawn on pending receipts only."""
        config = {"upi": {"upi-id": "mandali@upi", "payee-name": "Yuva Mandali"}}

        pending = _render(_donation(amount=10000, received_amount=4000), config)
        images = [p for p in pending.primitives if isinstance(p, ImageItem)]
        assert len(images) == 1
        assert images[0].source.startswith("upi://pay?pa=mandali@upi")
        assert "am=6000" in images[0].source

        paid = _render(_donation(), config)
        assert not any(isinstance(p, ImageItem) for p in paid.primitives)

    def test_logo_in_header(self, tmp_path):
        """The logo sits in the header's top-left corner unless hidden."""
        logo = tmp_path / "logo.png"
        Image.new("RGB", (20, 20), "orange").save(logo)

        pdf = _render(_donation(), {"logo_path": str(logo)})
        images = [p for p in pdf.primitives if isinstance(p, ImageItem)]
        assert len(images) == 1
        assert (images[0].x, images[0].y) == (12, 12)
        assert images[0].source == str(logo)

        hidden = _render(_donation(), {"logo_path": str(logo), "show_logo": False})
        assert not any(isinstance(p, ImageItem) for p in hidden.primitives)

    def test_all_text_is_positioned(self):
        """Every text primitive lies on the page."""
        pdf = _render(_donation(amount=10000, received_amount=4000))
        for p in pdf.primitives:
            if isinstance(p, TextItem):
                assert 0 < p.x < pdf.w
                assert 0 < p.y < pdf.h
