"""View components for Hostname Menu UI.

Contains:
- settings_form: Scratch-copy settings editor behind the Settings dialog
- menu_builder: Dropdown menu construction (rumps)
- status_item: Menu bar text fitting and status item sizing (AppKit)
- icons: House template icon (Pillow)

Only the settings form is imported here; the other modules pull in
rumps, AppKit or Pillow and are imported directly where used.
"""
from app.views.settings_form import SettingsForm

__all__ = ["SettingsForm"]
