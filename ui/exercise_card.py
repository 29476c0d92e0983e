from __future__ import annotations

import logging
import math

from kivy.metrics import dp
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDFlatButton, MDIconButton
from kivymd.uix.card import MDCard
from kivymd.uix.label import MDLabel
from kivymd.uix.textfield import MDTextField

from backend import REPS_STEP, WEIGHT_STEP
from backend.models import WorkoutExercise, WorkoutSet

ROW_HEIGHT = dp(48)


def _number(text: str):
    """Return ``text`` as an int when possible, otherwise as a float."""

    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {text!r}")
    return int(value) if value.is_integer() else value


class ExerciseCard(MDCard):
    """Card listing the sets of one exercise of the active workout.

    ``session`` is the :class:`~backend.workout_session.WorkoutSession` the
    card edits and ``on_change`` is called after every successful edit so
    the owning screen can redraw.
    """

    def __init__(self, exercise: WorkoutExercise, session, on_change, **kwargs):
        super().__init__(
            orientation="vertical",
            padding=dp(12),
            spacing=dp(6),
            size_hint_y=None,
            **kwargs,
        )
        self.exercise = exercise
        self.session = session
        self.on_change = on_change
        self.bind(minimum_height=self.setter("height"))
        self._build()

    def _build(self) -> None:
        done = sum(1 for s in self.exercise.sets if s.completed)
        header = MDBoxLayout(size_hint_y=None, height=ROW_HEIGHT)
        titles = MDBoxLayout(orientation="vertical")
        titles.add_widget(MDLabel(text=self.exercise.exercise_name, bold=True))
        titles.add_widget(
            MDLabel(
                text=f"{done}/{len(self.exercise.sets)} sets completed",
                font_style="Caption",
            )
        )
        header.add_widget(titles)
        header.add_widget(
            MDIconButton(icon="trash-can-outline", on_release=lambda *_: self._remove())
        )
        self.add_widget(header)

        for number, workout_set in enumerate(self.exercise.sets, 1):
            self.add_widget(self._set_row(number, workout_set))

        self.add_widget(
            MDFlatButton(text="Add Set", on_release=lambda *_: self._add_set())
        )

    def _set_row(self, number: int, workout_set: WorkoutSet) -> MDBoxLayout:
        row = MDBoxLayout(size_hint_y=None, height=ROW_HEIGHT, spacing=dp(4))
        row.add_widget(MDLabel(text=f"{number:02d}", size_hint_x=None, width=dp(28)))
        for field, step in (("weight", WEIGHT_STEP), ("reps", REPS_STEP)):
            row.add_widget(
                MDIconButton(
                    icon="minus",
                    on_release=lambda *_, f=field, d=-step: self._adjust(workout_set, f, d),
                )
            )
            text_field = MDTextField(
                text=str(getattr(workout_set, field)),
                input_filter="float" if field == "weight" else "int",
                hint_text=field,
            )
            text_field.bind(
                on_text_validate=lambda w, f=field: self._enter(workout_set, f, w),
                focus=lambda w, focused, f=field: (
                    None if focused else self._enter(workout_set, f, w)
                ),
            )
            row.add_widget(text_field)
            row.add_widget(
                MDIconButton(
                    icon="plus",
                    on_release=lambda *_, f=field, d=step: self._adjust(workout_set, f, d),
                )
            )
        row.add_widget(
            MDIconButton(
                icon="check-circle" if workout_set.completed else "check-circle-outline",
                on_release=lambda *_: self._toggle(workout_set),
            )
        )
        return row

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _adjust(self, workout_set: WorkoutSet, field: str, delta) -> None:
        if self.session.adjust_set(self.exercise.id, workout_set.id, **{field: delta}):
            self.on_change()

    def _enter(self, workout_set: WorkoutSet, field: str, text_field) -> None:
        text = text_field.text.strip()
        if text == str(getattr(workout_set, field)):
            return
        try:
            value = _number(text)
            changed = self.session.update_set(
                self.exercise.id, workout_set.id, **{field: value}
            )
        except ValueError:
            logging.warning("Rejected %s entry %r", field, text)
            text_field.error = True
            return
        text_field.error = False
        if changed:
            self.on_change()

    def _toggle(self, workout_set: WorkoutSet) -> None:
        if self.session.toggle_set(self.exercise.id, workout_set.id):
            self.on_change()

    def _add_set(self) -> None:
        if self.session.add_set(self.exercise.id):
            self.on_change()

    def _remove(self) -> None:
        if self.session.remove_exercise(self.exercise.id):
            self.on_change()
