from kivymd.app import MDApp
from kivymd.uix.screen import MDScreen
from kivymd.uix.list import TwoLineListItem
from kivy.properties import StringProperty

from backend import settings as app_settings
from backend.sessions import load_workouts
from backend.stats import (
    calculate_stats,
    chart_summary,
    format_volume,
    personal_records,
    weekly_volume,
)


class StatsScreen(MDScreen):
    """Totals, weekly volume chart and personal records."""

    this_week = StringProperty("0")
    total_workouts = StringProperty("0")
    total_volume = StringProperty("0.0k")
    total_sets = StringProperty("0")
    week_volume = StringProperty("0.0k")
    active_days = StringProperty("0/7")

    def on_pre_enter(self, *args):
        self.refresh()
        return super().on_pre_enter(*args)

    def refresh(self) -> None:
        store = MDApp.get_running_app().store
        workouts = load_workouts(store)
        stats = calculate_stats(workouts)
        self.this_week = str(stats.this_week_workouts)
        self.total_workouts = str(stats.total_workouts)
        self.total_volume = format_volume(stats.total_volume)
        self.total_sets = str(stats.total_sets)

        days = int(app_settings.get_value(store, "chart_days"))
        buckets = weekly_volume(workouts, days=days)
        summary = chart_summary(buckets)
        self.week_volume = format_volume(summary["total_volume"])
        self.active_days = f"{summary['active_days']}/{summary['days']}"
        chart = self.ids.get("volume_chart")
        if chart:
            chart.show(buckets)

        lst = self.ids.get("records_list")
        if not lst:
            return
        lst.clear_widgets()
        for rank, record in enumerate(personal_records(workouts), 1):
            lst.add_widget(
                TwoLineListItem(
                    text=f"{rank}. {record.exercise}",
                    secondary_text=f"{record.weight} lbs x {record.reps}",
                )
            )
