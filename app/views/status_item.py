"""Status item rendering for Hostname Menu.

Measures menu bar text with the system menu bar font, fits it into the
configured width and applies title and length to the rumps status item.

Usage:
    renderer = StatusItemRenderer(app)
    renderer.render("en0: 192.168.1.5", max_width=230)
"""
from typing import Optional

from config import get_logger
from hostinfo.fitting import FitResult, fit_title

logger = get_logger(__name__)


def measure_menu_bar_text(text: str) -> float:
    """Rendered width of ``text`` in the system menu bar font."""
    from AppKit import NSAttributedString, NSFont, NSFontAttributeName

    # Size 0 selects the default menu bar font size
    font = NSFont.menuBarFontOfSize_(0)
    attr_str = NSAttributedString.alloc().initWithString_attributes_(
        text, {NSFontAttributeName: font}
    )
    return float(attr_str.size().width)


class StatusItemRenderer:
    """Applies fitted text to a rumps.App status item.

    Attributes:
        app: The rumps.App whose title and status item length are set.
    """

    def __init__(self, app, measure=measure_menu_bar_text):
        self.app = app
        self._measure = measure
        self.last_result: Optional[FitResult] = None

    def _status_item(self):
        nsapp = getattr(self.app, "_nsapp", None)
        return getattr(nsapp, "nsstatusitem", None) if nsapp is not None else None

    def render(self, text: str, max_width: float) -> FitResult:
        """Fit ``text`` and update the status item."""
        result = fit_title(text, max_width, self._measure)
        self.app.title = result.title

        status_item = self._status_item()
        if status_item is not None:
            status_item.setLength_(result.length)

        self.last_result = result
        logger.debug(f"Rendered {result.mode.value}: {result.title!r} ({result.length:.0f}px)")
        return result
