"""Tests for the HTML card renderer."""

from skytone.renderers.cards import render_card_html, render_title_html


class TestRenderCard:
    """Tests for render_card_html."""

    def test_heading_and_body(self):
        html = render_card_html("Your Location", "Lat: 1.0, Lng: 2.0")
        assert "<div class='sky-card-heading'>Your Location</div>" in html
        assert "<div class='sky-card-body'>Lat: 1.0, Lng: 2.0</div>" in html

    def test_newlines_become_line_breaks(self):
        html = render_card_html(
            "Sunset & Twilight",
            "Sunset Starts: 05:18 PM\nSunset Ends: 07:48 PM\nTwilight Ends: 08:25 PM",
        )
        assert (
            "Sunset Starts: 05:18 PM<br>Sunset Ends: 07:48 PM<br>Twilight Ends: 08:25 PM"
            in html
        )

    def test_escapes_text(self):
        """Should not let error messages inject markup."""
        html = render_card_html("A & B", "Failed to fetch location: <script>")
        assert "A &amp; B" in html
        assert "&lt;script&gt;" in html
        assert "<script>" not in html


def test_title():
    assert render_title_html("SkyTone") == "<h1 class='sky-title'>SkyTone</h1>"
