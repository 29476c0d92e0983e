from __future__ import annotations

from kivy.graphics import Color, Rectangle
from kivy.metrics import dp
from kivy.properties import BooleanProperty, ListProperty, NumericProperty
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.widget import Widget
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.label import MDLabel

from backend.stats import bar_fractions

ACTIVE_COLOR = (0.78, 1, 0, 1)
IDLE_COLOR = (0.15, 0.15, 0.15, 1)
# Bars of days with a workout never shrink below this share of the height
MIN_ACTIVE_FRACTION = 0.08


class _VolumeBar(Widget):
    """Single bar that fills from the bottom."""

    fraction = NumericProperty(0.0)
    active = BooleanProperty(False)
    color = ListProperty(IDLE_COLOR)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        with self.canvas:
            self._color = Color(rgba=self.color)
            self._rect = Rectangle(pos=self.pos, size=(self.width, 0))
        self.bind(
            pos=self._update_graphics,
            size=self._update_graphics,
            fraction=self._update_graphics,
            active=self._update_graphics,
        )

    def _update_graphics(self, *args):
        self._color.rgba = ACTIVE_COLOR if self.active else IDLE_COLOR
        if self.active:
            height = self.height * max(self.fraction, MIN_ACTIVE_FRACTION)
        else:
            height = dp(4)
        self._rect.pos = self.pos
        self._rect.size = (self.width, height)


class VolumeChart(BoxLayout):
    """Bar chart of daily volume over the trailing week."""

    def __init__(self, **kwargs):
        kwargs.setdefault("orientation", "horizontal")
        kwargs.setdefault("spacing", dp(6))
        super().__init__(**kwargs)

    def show(self, buckets) -> None:
        """Rebuild the bars from a list of :class:`~backend.models.DayVolume`."""

        self.clear_widgets()
        for bucket, fraction in zip(buckets, bar_fractions(buckets)):
            column = MDBoxLayout(orientation="vertical", spacing=dp(4))
            column.add_widget(_VolumeBar(fraction=fraction, active=bucket.has_workout))
            column.add_widget(
                MDLabel(
                    text=bucket.label.upper(),
                    halign="center",
                    font_style="Caption",
                    size_hint_y=None,
                    height=dp(16),
                )
            )
            self.add_widget(column)
