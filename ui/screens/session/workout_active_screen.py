from kivymd.uix.screen import MDScreen
from kivy.properties import BooleanProperty, StringProperty
from kivymd.app import MDApp
from kivymd.uix.dialog import MDDialog
from kivymd.uix.button import MDFlatButton, MDRaisedButton

from backend import settings as app_settings
from backend.timer import format_time
from ui.exercise_card import ExerciseCard
from ui.rest_timer_panel import RestTimerPanel


class WorkoutActiveScreen(MDScreen):
    """Screen that shows the active workout with a stopwatch.

    The stopwatch belongs to the app's :class:`WorkoutSession`; this screen
    only binds to it. The optional rest timer panel is created on demand
    and released when hidden or when the screen is left.
    """

    formatted_time = StringProperty("0:00")
    sets_text = StringProperty("0/0 sets")
    can_finish = BooleanProperty(False)
    rest_timer_visible = BooleanProperty(False)
    _rest_panel = None
    _cancel_dialog = None

    @property
    def session(self):
        return MDApp.get_running_app().workout_session

    def on_pre_enter(self, *args):
        """Bind to the stopwatch and draw the exercises."""
        self.session.timer.bind(seconds=self._update_elapsed)
        self._update_elapsed(self.session.timer, self.session.timer.seconds)
        self.refresh()
        return super().on_pre_enter(*args)

    def on_leave(self, *args):
        self.session.timer.unbind(seconds=self._update_elapsed)
        self.hide_rest_timer()
        return super().on_leave(*args)

    def _update_elapsed(self, timer, seconds):
        self.formatted_time = format_time(seconds)

    def refresh(self) -> None:
        """Rebuild the exercise cards from the stored workout."""
        workout = self.session.current
        done, total = self.session.progress()
        self.sets_text = f"{done}/{total} sets"
        self.can_finish = bool(workout and workout.exercises)
        lst = self.ids.get("exercise_list")
        if not lst:
            return
        lst.clear_widgets()
        if workout is None:
            return
        for exercise in workout.exercises:
            lst.add_widget(ExerciseCard(exercise, self.session, self.refresh))

    # ------------------------------------------------------------------
    # Rest timer
    # ------------------------------------------------------------------

    def toggle_rest_timer(self) -> None:
        if self.rest_timer_visible:
            self.hide_rest_timer()
        else:
            self.show_rest_timer()

    def show_rest_timer(self) -> None:
        if self._rest_panel is not None:
            return
        store = MDApp.get_running_app().store
        self._rest_panel = RestTimerPanel(app_settings.get_value(store, "rest_duration"))
        self.ids.rest_timer_box.add_widget(self._rest_panel)
        self.rest_timer_visible = True

    def hide_rest_timer(self) -> None:
        if self._rest_panel is None:
            return
        self._rest_panel.release()
        box = self.ids.get("rest_timer_box")
        if box:
            box.remove_widget(self._rest_panel)
        self._rest_panel = None
        self.rest_timer_visible = False

    # ------------------------------------------------------------------
    # Finish / cancel
    # ------------------------------------------------------------------

    def open_exercise_picker(self) -> None:
        if self.manager:
            self.manager.current = "exercise_picker"

    def finish_workout(self) -> None:
        if self.session.finish() and self.manager:
            self.manager.current = "home"

    def confirm_cancel(self) -> None:
        """Ask before discarding the workout."""
        if not self._cancel_dialog:
            self._cancel_dialog = MDDialog(
                text="Are you sure you want to cancel this workout?",
                buttons=[
                    MDFlatButton(
                        text="Keep", on_release=lambda *_: self._cancel_dialog.dismiss()
                    ),
                    MDRaisedButton(text="Discard", on_release=self._perform_cancel),
                ],
            )
        self._cancel_dialog.open()

    def _perform_cancel(self, *args):
        if self._cancel_dialog:
            self._cancel_dialog.dismiss()
        self.session.cancel(confirmed=True)
        if self.manager:
            self.manager.current = "home"
