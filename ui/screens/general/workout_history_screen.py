from kivymd.app import MDApp
from kivymd.uix.screen import MDScreen
from kivymd.uix.list import TwoLineListItem
from kivymd.uix.dialog import MDDialog
from kivymd.uix.button import MDFlatButton
from kivy.properties import StringProperty

from backend.sessions import (
    format_workout_date,
    get_workout_history,
    history_summary,
    load_workouts,
)
from backend.stats import completed_set_count, format_volume, workout_volume
from backend.timer import format_time


def workout_details(workout) -> str:
    """Return the completed sets of ``workout`` as display text."""
    lines = [
        f"Duration: {format_time(workout.duration)}",
        f"Volume: {format_volume(workout_volume(workout))} lbs",
    ]
    for exercise in workout.exercises:
        lines.append(f"\n{exercise.exercise_name}")
        done = [s for s in exercise.sets if s.completed]
        for idx, workout_set in enumerate(done, 1):
            lines.append(f"  Set {idx}: {workout_set.weight} lbs x {workout_set.reps}")
    return "\n".join(lines)


class WorkoutHistoryScreen(MDScreen):
    """Display finished workouts, newest first, and open their details.

    Attributes:
        return_to (str): Name of the screen to return to when the Back
            button is pressed. Defaults to ``"home"``.
    """

    return_to = StringProperty("home")
    summary_text = StringProperty("")

    def on_pre_enter(self, *args):
        """Populate the history list before the screen becomes visible."""
        self.populate()
        return super().on_pre_enter(*args)

    def populate(self) -> None:
        """Fill the history list with finished workouts."""
        workouts = load_workouts(MDApp.get_running_app().store)
        summary = history_summary(workouts)
        self.summary_text = (
            f"{summary['workouts']} workouts  ·  "
            f"{summary['exercises']} exercises  ·  {summary['sets']} sets"
        )
        lst = self.ids.get("history_list")
        if not lst:
            return
        lst.clear_widgets()
        for workout in get_workout_history(workouts):
            item = TwoLineListItem(
                text=format_workout_date(workout),
                secondary_text=(
                    f"{format_time(workout.duration)}  ·  "
                    f"{len(workout.exercises)} exercises  ·  "
                    f"{completed_set_count(workout)} sets"
                ),
                on_release=lambda _, w=workout: self.open_workout(w),
            )
            lst.add_widget(item)

    def open_workout(self, workout) -> None:
        """Show the details of ``workout`` in a dialog."""
        dialog = MDDialog(
            title=format_workout_date(workout),
            text=workout_details(workout),
            buttons=[MDFlatButton(text="Close", on_release=lambda *_: dialog.dismiss())],
        )
        dialog.open()
