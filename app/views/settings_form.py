"""Settings form bound to a scratch copy of the configuration.

The form edits a deep copy of the committed AppConfig. ``save`` hands the
copy to the controller; ``cancel`` throws it away. The dialog shows the
form as one ``key = value`` line per setting, where each value is a JSON
literal so labels keep their trailing spaces:

    show_labels_in_menu_bar = false
    show_interface_names_in_menu_bar = true
    computer_name_label = "Computer Name: "
    local_hostname_label = "Local Hostname: "
    ip_address_label = "IP Address: "
    max_width = 230
"""
import json
import math
from typing import Callable, Dict, Optional, Tuple

from config import get_logger
from config.exceptions import ConfigurationError
from storage.config_store import AppConfig

logger = get_logger(__name__)

# Form key -> (LabelConfig attribute or None for AppConfig.max_width, expected type)
FORM_FIELDS: Dict[str, Tuple[Optional[str], type]] = {
    "show_labels_in_menu_bar": ("show_labels_in_menu_bar", bool),
    "show_interface_names_in_menu_bar": ("show_interface_names_in_menu_bar", bool),
    "computer_name_label": ("computer_name", str),
    "local_hostname_label": ("local_hostname", str),
    "ip_address_label": ("ip_address", str),
    "max_width": (None, float),
}

LABEL_FIELDS = ("computer_name", "local_hostname", "ip_address")
TOGGLE_FIELDS = ("show_labels_in_menu_bar", "show_interface_names_in_menu_bar")


class SettingsForm:
    """Editable scratch copy of the configuration.

    Example:
        >>> form = SettingsForm(store.config, controller.save_settings)
        >>> form.set_toggle("show_labels_in_menu_bar", True)
        >>> form.save()
    """

    def __init__(self, config: AppConfig, on_save: Callable[[AppConfig], None]):
        self.scratch = config.copy()
        self._on_save = on_save
        self._closed = False

    # === Field editing ===

    def set_label(self, name: str, value: str) -> None:
        if name not in LABEL_FIELDS:
            raise ConfigurationError(f"Unknown label: {name}", {"label": name})
        setattr(self.scratch.labels, name, value)

    def set_toggle(self, name: str, enabled: bool) -> None:
        if name not in TOGGLE_FIELDS:
            raise ConfigurationError(f"Unknown toggle: {name}", {"toggle": name})
        setattr(self.scratch.labels, name, bool(enabled))

    def set_max_width(self, width: float) -> None:
        if not math.isfinite(width) or width <= 0:
            raise ConfigurationError("Max width must be a positive number", {"value": width})
        self.scratch.max_width = float(width)

    # === Text form used by the dialog ===

    def to_text(self) -> str:
        """Render the scratch copy as ``key = <json>`` lines."""
        labels = self.scratch.labels
        lines = []
        for key, (attr, _) in FORM_FIELDS.items():
            value = self.scratch.max_width if attr is None else getattr(labels, attr)
            if isinstance(value, float) and value.is_integer():
                value = int(value)
            lines.append(f"{key} = {json.dumps(value, ensure_ascii=False)}")
        return "\n".join(lines)

    def apply_text(self, text: str) -> None:
        """Apply edited form text to the scratch copy.

        Blank lines are ignored. Keys left out keep their current value.

        Raises:
            ConfigurationError: On unknown keys, malformed lines or values
                of the wrong type. The scratch copy is left untouched.
        """
        updates = {}
        for line_no, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue

            key, sep, raw_value = line.partition("=")
            key = key.strip()
            if not sep:
                raise ConfigurationError(
                    f"Line {line_no}: expected 'key = value'", {"line": line}
                )
            if key not in FORM_FIELDS:
                raise ConfigurationError(f"Line {line_no}: unknown setting '{key}'", {"key": key})

            try:
                value = json.loads(raw_value.strip())
            except ValueError as e:
                raise ConfigurationError(
                    f"Line {line_no}: invalid value for '{key}'", {"value": raw_value.strip()}
                ) from e

            updates[key] = self._coerce(key, value)

        # Validate everything first, then apply
        for key, value in updates.items():
            attr, _ = FORM_FIELDS[key]
            if attr is None:
                self.set_max_width(value)
            elif attr in TOGGLE_FIELDS:
                self.set_toggle(attr, value)
            else:
                self.set_label(attr, value)

    @staticmethod
    def _coerce(key: str, value):
        _, kind = FORM_FIELDS[key]
        if kind is float:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"'{key}' must be a number", {"value": value})
            try:
                value = float(value)
            except OverflowError:
                value = math.inf
            if not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"'{key}' must be a positive number", {"value": value})
            return value
        if not isinstance(value, kind):
            raise ConfigurationError(
                f"'{key}' must be {'true or false' if kind is bool else 'a quoted string'}",
                {"value": value},
            )
        return value

    # === Commit / discard ===

    def save(self) -> None:
        """Commit the scratch copy."""
        if self._closed:
            return
        self._closed = True
        logger.debug(f"Settings form saved: {self.scratch}")
        self._on_save(self.scratch)

    def cancel(self) -> None:
        """Discard the scratch copy."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Settings form cancelled")
