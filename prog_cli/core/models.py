"""Lightweight data models for parsed programs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping

RowRecord = Mapping[str, Any]


class ProgramFormatError(ValueError):
    """Raised when a program document does not have the exported shape."""


def _mapping_list(value: Any, where: str) -> List[Mapping[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, Mapping) for item in value):
        raise ProgramFormatError(f"{where} must be a list of objects")
    return value


class CellKind(str, Enum):
    """What a single session cell denotes."""

    TITLE = "title"
    SET_SPEC = "set"


@dataclass(frozen=True)
class CellClassification:
    """Classification of one cell along with the rule that decided it."""

    text: str
    kind: CellKind
    rule: str


@dataclass
class Exercise:
    title: str
    sets: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "sets": list(self.sets)}


@dataclass
class Session:
    session_number: str
    exercises: List[Exercise] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_number": self.session_number,
            "exercises": [exercise.to_dict() for exercise in self.exercises],
        }


@dataclass
class Week:
    week_date: str
    sessions: List[Session] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "week_date": self.week_date,
            "sessions": [session.to_dict() for session in self.sessions],
        }


@dataclass
class Program:
    """Top-level document: one week per input sheet, in sheet order."""

    weeks: List[Week] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"weeks": [week.to_dict() for week in self.weeks]}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Program":
        """Rebuild a program from its exported JSON shape."""
        weeks: List[Week] = []
        for raw_week in _mapping_list(payload.get("weeks"), "weeks"):
            week_date = str(raw_week.get("week_date", ""))
            sessions: List[Session] = []
            for raw_session in _mapping_list(raw_week.get("sessions"), f"week {week_date!r} sessions"):
                session_number = str(raw_session.get("session_number", ""))
                where = f"week {week_date!r}, session {session_number!r}"
                exercises: List[Exercise] = []
                for raw_exercise in _mapping_list(raw_session.get("exercises"), f"{where} exercises"):
                    title = str(raw_exercise.get("title", ""))
                    raw_sets = raw_exercise.get("sets") or []
                    if not isinstance(raw_sets, list):
                        raise ProgramFormatError(f"{where}, exercise {title!r} sets must be a list")
                    exercises.append(Exercise(title=title, sets=[str(item) for item in raw_sets]))
                sessions.append(Session(session_number=session_number, exercises=exercises))
            weeks.append(Week(week_date=week_date, sessions=sessions))
        return cls(weeks=weeks)


@dataclass
class SheetRows:
    """One input sheet: its label and its rows in source order."""

    name: str
    rows: List[RowRecord] = field(default_factory=list)
