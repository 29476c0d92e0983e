from kivymd.app import MDApp
from kivymd.uix.screen import MDScreen
from kivymd.uix.list import TwoLineListItem
from kivy.properties import StringProperty
from kivy.clock import Clock

from backend.exercises import search_exercises
from backend.models import CATEGORIES


class ExercisePickerScreen(MDScreen):
    """Searchable catalog used to add exercises to the active workout."""

    search_text = StringProperty("")
    category = StringProperty("")
    categories = CATEGORIES
    _search_event = None

    def on_pre_enter(self, *args):
        self.search_text = ""
        self.category = ""
        search = self.ids.get("search_field")
        if search:
            search.text = ""
        self.populate()
        return super().on_pre_enter(*args)

    def on_leave(self, *args):
        if self._search_event:
            self._search_event.cancel()
            self._search_event = None
        return super().on_leave(*args)

    def update_search(self, text: str) -> None:
        """Filter the list after the user stops typing."""
        self.search_text = text
        if self._search_event:
            self._search_event.cancel()
        self._search_event = Clock.schedule_once(lambda *_: self.populate(), 0.2)

    def select_category(self, category: str) -> None:
        """Filter by ``category``; an empty string shows all categories."""
        self.category = category
        self.populate()

    def populate(self) -> None:
        lst = self.ids.get("exercise_list")
        if not lst:
            return
        lst.clear_widgets()
        for exercise in search_exercises(self.search_text, self.category or None):
            lst.add_widget(
                TwoLineListItem(
                    text=exercise.name,
                    secondary_text=exercise.category.upper(),
                    on_release=lambda _, e=exercise: self.select_exercise(e),
                )
            )

    def select_exercise(self, exercise) -> None:
        MDApp.get_running_app().workout_session.add_exercise(exercise)
        if self.manager:
            self.manager.current = "workout_active"
