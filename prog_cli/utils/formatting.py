"""Formatting helpers used by exports and console output."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from prog_cli.core.models import Program, Week


def format_sets(sets: Sequence[str], separator: str = ", ") -> str:
    """Join set entries for display."""
    if not sets:
        return "(no sets)"
    return separator.join(sets)


def week_counts(week: Week) -> Dict[str, int]:
    """Count sessions, exercises and sets in a week."""
    exercises = [exercise for session in week.sessions for exercise in session.exercises]
    return {
        "sessions": len(week.sessions),
        "exercises": len(exercises),
        "sets": sum(len(exercise.sets) for exercise in exercises),
    }


def program_summary(program: Program) -> Dict[str, Any]:
    """Summarize a program per week and in total."""
    weeks: List[Dict[str, Any]] = []
    totals = {"sessions": 0, "exercises": 0, "sets": 0}

    for week in program.weeks:
        counts = week_counts(week)
        weeks.append({"week_date": week.week_date, **counts})
        for key, value in counts.items():
            totals[key] += value

    return {"weeks": len(program.weeks), **totals, "by_week": weeks}
