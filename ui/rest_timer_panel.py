from __future__ import annotations

from kivy.graphics import Color, Rectangle
from kivy.metrics import dp
from kivy.properties import StringProperty
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDIconButton, MDRaisedButton
from kivymd.uix.label import MDLabel

from backend.timer import RestTimer, format_time

NORMAL_COLOR = (0.78, 1, 0, 1)
WARNING_COLOR = (1, 0.42, 0.21, 1)


class RestTimerPanel(MDBoxLayout):
    """Count-down rest timer with preset buttons.

    The panel owns its :class:`RestTimer`; :meth:`release` must be called
    when the panel is removed so the tick event is cancelled.
    """

    label_text = StringProperty("1:00")

    def __init__(self, initial_seconds: int, clock=None, **kwargs):
        super().__init__(
            orientation="vertical",
            spacing=dp(8),
            padding=dp(12),
            size_hint_y=None,
            height=dp(200),
            **kwargs,
        )
        self.timer = RestTimer(initial_seconds, clock=clock)
        self.timer.bind(seconds=self._refresh, is_running=self._refresh)
        self.timer.bind(on_complete=self._on_complete)

        self._display = MDLabel(
            text=self.timer.formatted,
            halign="center",
            font_style="H3",
            theme_text_color="Custom",
            text_color=NORMAL_COLOR,
        )
        self.add_widget(self._display)

        presets = MDBoxLayout(spacing=dp(6), size_hint_y=None, height=dp(40))
        for seconds in self.timer.presets:
            presets.add_widget(
                MDRaisedButton(
                    text=f"{seconds}s",
                    on_release=lambda *_, s=seconds: self.timer.apply_preset(s),
                )
            )
        self.add_widget(presets)

        controls = MDBoxLayout(spacing=dp(6), size_hint_y=None, height=dp(48))
        self._toggle_btn = MDRaisedButton(
            text="START", on_release=lambda *_: self.timer.toggle()
        )
        controls.add_widget(self._toggle_btn)
        controls.add_widget(
            MDIconButton(icon="restore", on_release=lambda *_: self.timer.reset())
        )
        self.add_widget(controls)

        with self.canvas.after:
            Color(rgba=NORMAL_COLOR)
            self._progress = Rectangle(pos=self.pos, size=(0, dp(4)))
        self.bind(pos=self._refresh, size=self._refresh)
        self._refresh()

    def _refresh(self, *args) -> None:
        timer = self.timer
        self.label_text = format_time(timer.seconds)
        self._display.text = self.label_text
        self._display.text_color = WARNING_COLOR if timer.is_warning else NORMAL_COLOR
        self._toggle_btn.text = "PAUSE" if timer.is_running else "START"
        self._progress.pos = self.pos
        self._progress.size = (self.width * timer.progress, dp(4))

    def _on_complete(self, *args) -> None:
        self._refresh()

    def release(self) -> None:
        self.timer.release()
