"""Menu bar text fitting.

Decides whether the status item shows the full text, a center-ellipsized
version of it, or only the icon, given a maximum width in pixels.

The truncation is a single-pass estimate: the number of characters to keep
is scaled by the ratio of available to measured width, and the shortened
text is measured once more only to size the status item. The result may
still be slightly wider than the budget.

Characters are counted as code points with len(), not grapheme clusters.
An emoji sequence or a letter with combining accents counts as several
characters, so the keep count and the split point are code point based
and may cut through such a cluster.

Example:
    >>> measure = lambda s: len(s) * 7.0
    >>> fit_title("192.168.1.5", max_width=230, measure=measure).mode
    <FitMode.FULL: 'full'>
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from config import UI, get_logger

logger = get_logger(__name__)

# Returns the rendered width of a string in pixels
TextMeasure = Callable[[str], float]


class FitMode(Enum):
    """How the title ended up being rendered."""
    FULL = "full"
    TRUNCATED = "truncated"
    ICON_ONLY = "icon_only"


@dataclass(frozen=True)
class FitResult:
    """Title and total status item length to apply.

    Attributes:
        title: Text next to the icon. Empty in icon-only mode.
        length: Icon width + spacing + rendered title width.
        mode: Which branch of the fitting produced this result.
    """
    title: str
    length: float
    mode: FitMode


def center_ellipsize(text: str, max_chars: int, ellipsis: str = UI.ELLIPSIS) -> str:
    """Keep ``max_chars // 2 - 1`` characters from each end of ``text``.

    Examples:
        >>> center_ellipsize("Computer Name: Office-iMac-Pro", 20)
        'Computer ...-iMac-Pro'
    """
    keep = max_chars // 2 - 1
    if keep <= 0:
        return ellipsis
    return text[:keep] + ellipsis + text[-keep:]


def fit_title(
    text: str,
    max_width: float,
    measure: TextMeasure,
    icon_width: float = UI.ICON_WIDTH,
    spacing: float = UI.ICON_SPACING,
) -> FitResult:
    """Fit ``text`` into ``max_width`` pixels next to the status icon.

    Args:
        text: Formatted menu bar text.
        max_width: Budget for icon + spacing + text.
        measure: Callable returning the rendered width of a string.
        icon_width: Width of the status icon.
        spacing: Gap between icon and text.

    Returns:
        FitResult with the title to show and the status item length.
    """
    chrome = icon_width + spacing
    text_width = measure(text)

    if chrome + text_width <= max_width:
        return FitResult(title=text, length=chrome + text_width, mode=FitMode.FULL)

    if text_width <= 0:
        # Nothing measurable to shrink; the budget can't even hold the icon
        logger.debug(f"Budget {max_width} smaller than icon, showing icon only")
        return FitResult(title="", length=chrome, mode=FitMode.ICON_ONLY)

    available = max_width - chrome
    ratio = available / text_width
    max_chars = math.floor(len(text) * ratio)

    if max_chars >= UI.MIN_TRUNCATED_CHARS:
        truncated = center_ellipsize(text, max_chars)
        logger.debug(f"Truncated {text!r} to {truncated!r} (max_chars={max_chars})")
        return FitResult(
            title=truncated,
            length=chrome + measure(truncated),
            mode=FitMode.TRUNCATED,
        )

    logger.debug(f"Only {max_chars} chars fit in {max_width}px, showing icon only")
    return FitResult(title="", length=chrome, mode=FitMode.ICON_ONLY)


__all__ = ["FitMode", "FitResult", "TextMeasure", "center_ellipsize", "fit_title"]
