"""Context help tracking and the scene naming dialog state."""

from __future__ import annotations

import enum
from collections.abc import Iterable

SCENE_NAME_LIMIT = 99
"""Longest scene name the naming dialog accepts, in characters."""


class HelpTopic(enum.Enum):
    """Help text a part of the window offers when the pointer is over it."""

    GENERAL = "general"
    INPUT = "input"
    GEQ = "geq"
    HDEQ = "hdeq"
    SPECTRUM = "spectrum"
    CROSSOVER = "crossover"
    COMP = "comp"
    STEREO = "stereo"
    LIMITER = "limiter"
    BOOST = "boost"
    OUTPUT = "output"
    EQ_OPTIONS = "eq_options"
    SPECTRUM_OPTIONS = "spectrum_options"
    TRANSPORT_CONTROLS = "transport_controls"
    SCENES = "scenes"
    EQ_BYPASS = "eq_bypass"
    BAND_BUTTON = "band_button"
    LIMITER_BYPASS = "limiter_bypass"
    BYPASS = "bypass"
    PREFERENCES = "preferences"
    HELP = "help"
    KEYS = "keys"
    PREREQUISITES = "prerequisites"


class HelpContext:
    """Which help topic the pointer last entered, and whether help is forced.

    Some dialogs do not receive the keyboard focus straight away; entering them
    forces the next Shift+F1 press to show their help regardless.
    """

    def __init__(self) -> None:
        self._topic = HelpTopic.GENERAL
        self._forced = False

    @property
    def topic(self) -> HelpTopic:
        """Topic that a help request currently shows."""
        return self._topic

    @property
    def forced(self) -> bool:
        """Whether the next key press is checked for a help request."""
        return self._forced

    def enter(self, topic: HelpTopic, force: bool = False) -> None:
        """Record that the pointer entered an area with the given help topic."""
        self._topic = HelpTopic(topic)
        if force:
            self._forced = True

    def take_forced(self) -> HelpTopic | None:
        """Consume a forced help request, returning its topic if there was one."""
        if not self._forced:
            return None
        self._forced = False
        return self._topic


class SceneNamer:
    """State of the dialog that renames a scene."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names = [str(name) for name in names]
        if not self._names:
            raise ValueError("there must be at least one scene")
        self._hot = 0
        self._text = ""

    @property
    def names(self) -> list[str]:
        """Current names of every scene."""
        return list(self._names)

    @property
    def hot_scene(self) -> int:
        """Index of the scene last clicked, which the dialog renames."""
        return self._hot

    @property
    def text(self) -> str:
        """Text currently in the name entry."""
        return self._text

    def select(self, index: int) -> None:
        """Make a scene the one the dialog acts on."""
        if not 0 <= index < len(self._names):
            raise IndexError(f"scene {index} out of range")
        self._hot = index

    def edit(self, text: str) -> None:
        """Record the text typed into the name entry."""
        if len(text) > SCENE_NAME_LIMIT:
            raise ValueError(
                f"scene name longer than {SCENE_NAME_LIMIT} characters"
            )
        self._text = text

    def confirm(self) -> str:
        """Give the selected scene the entered name and return it."""
        self._names[self._hot] = self._text
        return self._text

    def title(self) -> str:
        """Dialog title: the current name of the selected scene."""
        return self._names[self._hot]