"""Tests for app/views/status_item.py"""
from unittest.mock import MagicMock

from app.views.status_item import StatusItemRenderer
from hostinfo.fitting import FitMode


def measure(text: str) -> float:
    return len(text) * 7.0


class TestStatusItemRenderer:
    """Tests for StatusItemRenderer with a fake measure."""

    def test_full_title(self, mock_rumps_app):
        renderer = StatusItemRenderer(mock_rumps_app, measure=measure)
        result = renderer.render("10.0.0.2", max_width=230)

        assert result.mode is FitMode.FULL
        assert mock_rumps_app.title == "10.0.0.2"
        mock_rumps_app._nsapp.nsstatusitem.setLength_.assert_called_once_with(28 + 56)

    def test_icon_only(self, mock_rumps_app):
        renderer = StatusItemRenderer(mock_rumps_app, measure=measure)
        renderer.render("Computer Name: Office-iMac-Pro", max_width=60)

        assert mock_rumps_app.title == ""
        mock_rumps_app._nsapp.nsstatusitem.setLength_.assert_called_once_with(28)
        assert renderer.last_result.mode is FitMode.ICON_ONLY

    def test_truncated(self, mock_rumps_app):
        renderer = StatusItemRenderer(mock_rumps_app, measure=measure)
        renderer.render("a" * 40, max_width=150)
        assert "..." in mock_rumps_app.title

    def test_before_run_only_sets_title(self):
        """Without a running NSApp there is no status item to size."""
        app = MagicMock(spec=["title"])
        renderer = StatusItemRenderer(app, measure=measure)
        renderer.render("host", max_width=230)
        assert app.title == "host"
