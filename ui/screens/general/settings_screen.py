from __future__ import annotations

"""Screen for modifying app settings."""

import logging

from kivymd.uix.screen import MDScreen
from kivymd.app import MDApp
from kivy.properties import StringProperty

from backend import settings as app_settings

# Field id -> settings key
_FIELDS = {
    "rest_duration_field": "rest_duration",
    "chart_days_field": "chart_days",
}


class SettingsScreen(MDScreen):
    """Display and persist user-configurable settings."""

    return_to = StringProperty("home")
    """Name of the screen to return to when leaving settings."""

    def on_pre_enter(self, *args) -> None:
        """Populate controls from stored settings."""
        store = MDApp.get_running_app().store
        for field_id, key in _FIELDS.items():
            field = self.ids.get(field_id)
            if field is not None:
                field.text = str(app_settings.get_value(store, key))
                field.error = False

    def save_field(self, field_id: str) -> None:
        """Validate and persist the value typed into ``field_id``."""
        field = self.ids[field_id]
        try:
            value = int(field.text)
            if value <= 0:
                raise ValueError(value)
        except ValueError:
            logging.warning("Invalid value %r for %s", field.text, field_id)
            field.error = True
            return
        field.error = False
        app_settings.set_value(MDApp.get_running_app().store, _FIELDS[field_id], value)
