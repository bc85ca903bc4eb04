import re
from dataclasses import dataclass
from enum import Enum


class TaskSection(str, Enum):
    ACTIVE = "active"
    WAITING = "waiting"
    COMPLETED = "completed"
    BACKLOG = "backlog"
    BLOCKED = "blocked"


NOTES_SECTION = "notes"

# Canonical document order
SECTION_MARKERS: tuple[tuple[str, str], ...] = (
    (TaskSection.ACTIVE.value, "🔴 Active Tasks"),
    (TaskSection.WAITING.value, "🟡 Waiting for Owner Review"),
    (TaskSection.COMPLETED.value, "✅ Completed"),
    (TaskSection.BACKLOG.value, "📋 Backlog"),
    (TaskSection.BLOCKED.value, "🚫 Blocked"),
    (NOTES_SECTION, "📝 Notes & Decisions Log"),
)

# Template placeholders written into an otherwise empty section
SECTION_PLACEHOLDERS: dict[TaskSection, str] = {
    TaskSection.ACTIVE: "_(Tasks currently being worked on)_",
    TaskSection.WAITING: "_(Completed work pending approval before use)_",
    TaskSection.COMPLETED: "_(Finished and approved items)_",
    TaskSection.BACKLOG: "_(Queued work not yet started)_",
    TaskSection.BLOCKED: "_(Items waiting on external factors or owner decisions)_",
}
SHARED_PLACEHOLDERS = frozenset({"Nothing yet.", "Nothing blocked."})
PLACEHOLDERS = frozenset(SECTION_PLACEHOLDERS.values()) | SHARED_PLACEHOLDERS

ITALIC_PARENTHETICAL_RE = re.compile(r"^_\(.*\)_$")


@dataclass(frozen=True)
class SectionSpan:
    """Content lines of a section: ``lines[start:end]``, heading excluded."""

    key: str
    heading: int
    start: int
    end: int


def is_heading(line: str) -> bool:
    return line.lstrip().startswith("#")


def match_section_heading(line: str) -> str | None:
    if not is_heading(line):
        return None
    for key, marker in SECTION_MARKERS:
        if marker in line:
            return key
    return None


def locate_sections(lines: list[str]) -> list[SectionSpan]:
    """Find the known sections with a single forward scan.

    Every known heading closes the span opened by the previous one, so a
    missing section never widens its neighbours. Only the first heading for
    a given key opens a span.
    """
    headings: list[tuple[str, int]] = []
    for index, line in enumerate(lines):
        key = match_section_heading(line)
        if key is not None:
            headings.append((key, index))

    spans: list[SectionSpan] = []
    seen: set[str] = set()
    for position, (key, index) in enumerate(headings):
        if key in seen:
            continue
        seen.add(key)
        end = headings[position + 1][1] if position + 1 < len(headings) else len(lines)
        spans.append(SectionSpan(key=key, heading=index, start=index + 1, end=end))
    return spans


def is_placeholder(text: str) -> bool:
    return text in PLACEHOLDERS


def is_italic_parenthetical(text: str) -> bool:
    return ITALIC_PARENTHETICAL_RE.match(text) is not None
