from __future__ import annotations
from enum import Enum
from typing import Optional
import logging

class BuildingState(Enum):
    CLOSED       = "closed"
    OUT_OF_HOURS = "out of hours"
    OPEN         = "open"
    FIRE_DRILL   = "fire drill"
    FIRE_ALARM   = "fire alarm"

    @property
    def is_normal(self) -> bool: return self in NORMAL_STATES

    @property
    def is_emergency(self) -> bool: return self in EMERGENCY_STATES

    @classmethod
    def parse(cls, tag) -> Optional["BuildingState"]:
        """Case-insensitive lookup of a state tag; None when unrecognised."""
        if not isinstance(tag, str):
            return None
        try:
            return cls(tag.lower())
        except ValueError:
            return None

NORMAL_STATES = frozenset({BuildingState.CLOSED, BuildingState.OUT_OF_HOURS, BuildingState.OPEN})
EMERGENCY_STATES = frozenset({BuildingState.FIRE_DRILL, BuildingState.FIRE_ALARM})

class BuildingStateMachine:
    """Current state plus the last normal state to fall back to after an emergency."""

    def __init__(self, initial: BuildingState = BuildingState.OUT_OF_HOURS):
        if not initial.is_normal:
            raise ValueError(f"initial state must be a normal state, got {initial.value!r}")
        self._state = initial
        self._last_normal = initial
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def state(self) -> BuildingState: return self._state

    @property
    def last_normal(self) -> BuildingState: return self._last_normal

    def enter(self, nxt: BuildingState) -> None:
        if nxt is not self._state:
            self.logger.info(f"State transition: {self._state.value} -> {nxt.value}")
        self._state = nxt
        if nxt.is_normal:
            self._last_normal = nxt

    def restore_last_normal(self) -> BuildingState:
        """Leave an emergency; last_normal is left untouched."""
        self.logger.info(f"State transition: {self._state.value} -> {self._last_normal.value} (restored)")
        self._state = self._last_normal
        return self._state
