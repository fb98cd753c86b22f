"""Markdown program export functionality."""

from __future__ import annotations

from pathlib import Path
from typing import List

from prog_cli.core.models import Program, Week
from prog_cli.utils.formatting import format_sets, week_counts


def week_to_markdown(week: Week) -> str:
    """Render one week as a markdown section."""
    counts = week_counts(week)
    lines: List[str] = [
        f"## {week.week_date}",
        "",
        f"- **Sessions:** {counts['sessions']}",
        f"- **Exercises:** {counts['exercises']}",
        f"- **Sets:** {counts['sets']}",
        "",
    ]

    if not week.sessions:
        lines.extend(["No sessions", ""])
        return "\n".join(lines)

    for session in week.sessions:
        lines.append(f"### {session.session_number}")
        lines.append("")
        for idx, exercise in enumerate(session.exercises, 1):
            lines.append(f"{idx}. **{exercise.title}**: {format_sets(exercise.sets)}")
        lines.append("")

    return "\n".join(lines)


def program_to_markdown(program: Program, title: str = "Training Program") -> str:
    """Convert a full program to markdown."""
    sections = [f"# {title}", ""]
    if not program.weeks:
        sections.append("No weeks")
    for week in program.weeks:
        sections.append(week_to_markdown(week))
    return "\n".join(sections).rstrip() + "\n"


def write_program_markdown(path: Path, program: Program, title: str = "Training Program") -> Path:
    """Write the program as markdown and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(program_to_markdown(program, title=title), encoding="utf-8")
    return path
