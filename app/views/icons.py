"""Icon generation for Hostname Menu.

Draws the menu bar house glyph as a black-on-transparent PNG. The status
item marks it as a template image so macOS tints it for light and dark
menu bars.

Usage:
    from app.views.icons import IconGenerator

    icons = IconGenerator()
    path = icons.create_house_icon()
"""
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional

from PIL import Image, ImageDraw

from config import STORAGE, UI, get_logger

logger = get_logger(__name__)

# Template images only use the alpha channel
TEMPLATE_RGBA = (0, 0, 0, 255)


class IconGenerator:
    """Generates and caches icons for the menu bar application."""

    def __init__(self, temp_dir: Optional[Path] = None):
        self._temp_dir = temp_dir or Path(tempfile.gettempdir()) / STORAGE.ICON_TEMP_DIR
        self._temp_dir.mkdir(parents=True, exist_ok=True)
        self._cache: Dict[str, str] = {}
        logger.debug(f"IconGenerator initialized, temp dir: {self._temp_dir}")

    def create_house_icon(self, size: int = None) -> str:
        """Create the house glyph shown next to the menu bar text.

        Args:
            size: Icon size in pixels (default from UI config).

        Returns:
            Path to the generated PNG file.
        """
        size = size or UI.STATUS_ICON_SIZE
        cache_key = f"house_{size}"

        if cache_key in self._cache:
            return self._cache[cache_key]

        img = Image.new('RGBA', (size, size), (0, 0, 0, 0))
        draw = ImageDraw.Draw(img)

        padding = max(1, size // 9)
        mid_x = size / 2
        eave_y = size * 0.45

        # Roof
        draw.polygon(
            [(padding, eave_y), (mid_x, padding), (size - padding, eave_y)],
            fill=TEMPLATE_RGBA,
        )

        # Walls with a door cut out
        wall_left = padding + size * 0.12
        wall_right = size - padding - size * 0.12
        bottom = size - padding
        draw.rectangle([wall_left, eave_y, wall_right, bottom], fill=TEMPLATE_RGBA)

        door_half = size * 0.1
        draw.rectangle(
            [mid_x - door_half, size * 0.65, mid_x + door_half, bottom],
            fill=(0, 0, 0, 0),
        )

        icon_path = self._temp_dir / f'{cache_key}.png'
        img.save(str(icon_path), 'PNG')

        self._cache[cache_key] = str(icon_path)
        return str(icon_path)

    def cleanup(self) -> None:
        """Clean up temporary icon files."""
        try:
            if self._temp_dir.exists():
                shutil.rmtree(self._temp_dir)
        except OSError as e:
            logger.warning(f"Could not clean up {self._temp_dir}: {e}")

        self._cache.clear()
        logger.debug("Icon cache cleared")

