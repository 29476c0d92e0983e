import logging
from pathlib import Path

from kivymd.app import MDApp
from kivy.lang import Builder

from core import DEFAULT_DB_PATH, SQLiteStore, WorkoutSession
from ui.screens import (  # noqa: F401 - registers screen classes for ui/main.kv
    ExercisePickerScreen,
    HomeScreen,
    SettingsScreen,
    StatsScreen,
    WorkoutActiveScreen,
    WorkoutHistoryScreen,
)
from ui.volume_chart import VolumeChart  # noqa: F401 - used in ui/main.kv

KV_PATH = Path(__file__).resolve().parent / "ui" / "main.kv"


class WorkoutApp(MDApp):
    """Application object holding the store and the workout session."""

    store: SQLiteStore | None = None
    workout_session: WorkoutSession | None = None

    def build(self):
        self.title = "Workout Log"
        self.theme_cls.theme_style = "Dark"
        self.theme_cls.primary_palette = "Lime"
        self.store = SQLiteStore(DEFAULT_DB_PATH)
        self.workout_session = WorkoutSession(self.store)
        logging.info("Using workout store at %s", DEFAULT_DB_PATH)
        return Builder.load_file(str(KV_PATH))

    def on_start(self):
        # An unfinished workout from a previous run resumes immediately.
        if self.workout_session.is_active:
            self.start_workout()

    def start_workout(self):
        """Resume or begin the workout and show the active screen."""
        self.workout_session.start()
        if self.root:
            self.root.current = "workout_active"

    def on_stop(self):
        if self.workout_session:
            self.workout_session.timer.release()


def main():
    WorkoutApp().run()


if __name__ == "__main__":
    main()
