from kivymd.app import MDApp
from kivymd.uix.screen import MDScreen
from kivy.properties import BooleanProperty, StringProperty

from backend.sessions import format_workout_date, last_workout, load_workouts
from backend.stats import calculate_stats, completed_set_count, format_volume


class HomeScreen(MDScreen):
    """Landing screen with headline stats and the start/resume button."""

    this_week = StringProperty("0")
    total_workouts = StringProperty("0")
    total_sets = StringProperty("0")
    total_volume = StringProperty("0.0k")
    last_workout_text = StringProperty("")
    has_active_workout = BooleanProperty(False)

    def on_pre_enter(self, *args):
        self.refresh()
        return super().on_pre_enter(*args)

    def refresh(self) -> None:
        """Recompute the stats shown on the screen from the store."""
        app = MDApp.get_running_app()
        workouts = load_workouts(app.store)
        stats = calculate_stats(workouts)
        self.this_week = str(stats.this_week_workouts)
        self.total_workouts = str(stats.total_workouts)
        self.total_sets = str(stats.total_sets)
        self.total_volume = format_volume(stats.total_volume)

        latest = last_workout(workouts)
        if latest:
            self.last_workout_text = (
                f"{format_workout_date(latest)}  ·  "
                f"{len(latest.exercises)} exercises  ·  "
                f"{completed_set_count(latest)} sets"
            )
        else:
            self.last_workout_text = ""
        self.has_active_workout = app.workout_session.is_active

    def start_workout(self) -> None:
        MDApp.get_running_app().start_workout()
