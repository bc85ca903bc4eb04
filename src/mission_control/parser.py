import logging
import re

from src.mission_control.schemas import DashboardData, Note, Task
from src.mission_control.sections import (
    NOTES_SECTION,
    TaskSection,
    is_heading,
    is_italic_parenthetical,
    is_placeholder,
    locate_sections,
)

logger = logging.getLogger(__name__)

LAST_UPDATED_RE = re.compile(r"_Last updated: (.+)_")
TASK_LINE_RE = re.compile(r"^\s*- \[.?\] (.+)$")
COMPLETED_DATE_RE = re.compile(r"^\[(\d{4}-\d{2}-\d{2})\] (.+)$")
# Cells may contain escaped pipes (\|)
TABLE_CELL = r"((?:[^|\\]|\\.)+)"
TABLE_ROW_RE = re.compile(rf"^\|{TABLE_CELL}\|{TABLE_CELL}\|{TABLE_CELL}\|$")
SEPARATOR_CELL_RE = re.compile(r"^:?-+:?$")

NOTES_HEADER = ("Date", "Item", "Decision/Note")


def parse_mission_control(document_text: str) -> DashboardData:
    """Build the dashboard data from the text of a MISSION_CONTROL document.

    Best effort by contract: a missing heading, table or line leaves the
    matching field empty and never raises.
    """
    lines = document_text.splitlines()
    spans = {span.key: span for span in locate_sections(lines)}

    sections: dict[str, tuple[Task, ...]] = {}
    for section in TaskSection:
        span = spans.get(section.value)
        if span is None:
            logger.debug(f"Section '{section.value}' not found")
            sections[section.value] = ()
            continue
        sections[section.value] = extract_tasks(lines[span.start : span.end], section)

    notes_span = spans.get(NOTES_SECTION)
    notes = extract_notes(lines[notes_span.start : notes_span.end]) if notes_span else ()

    data = DashboardData(
        **sections,
        notes=notes,
        last_updated=extract_last_updated(lines),
    )
    logger.debug(
        "Parsed dashboard: "
        + ", ".join(f"{key}={len(tasks)}" for key, tasks in sections.items())
        + f", notes={len(notes)}"
    )
    return data


def extract_last_updated(lines: list[str]) -> str:
    for line in lines:
        match = LAST_UPDATED_RE.search(line)
        if match:
            return match.group(1)
    return ""


def extract_tasks(section_lines: list[str], section: TaskSection) -> tuple[Task, ...]:
    candidates: list[str] = []
    for line in section_lines:
        match = TASK_LINE_RE.match(line)
        if not match:
            continue
        text = match.group(1).strip()
        if text:
            candidates.append(text)

    # A lone italic "(...)" line is a template placeholder, whatever its wording
    if len(candidates) == 1 and is_italic_parenthetical(candidates[0]):
        return ()

    tasks: list[Task] = []
    for text in candidates:
        if section == TaskSection.COMPLETED:
            date_match = COMPLETED_DATE_RE.match(text)
            if date_match:
                tasks.append(Task(text=date_match.group(2), date=date_match.group(1)))
                continue
        if is_placeholder(text):
            continue
        tasks.append(Task(text=text))
    return tuple(tasks)


def split_table_row(line: str) -> tuple[str, str, str] | None:
    match = TABLE_ROW_RE.match(line.strip())
    if not match:
        return None
    date, item, note = (cell.replace("\\|", "|").strip() for cell in match.groups())
    return date, item, note


def extract_notes(section_lines: list[str]) -> tuple[Note, ...]:
    notes: list[Note] = []
    in_table = False
    for line in section_lines:
        if is_heading(line):
            break
        cells = split_table_row(line)
        if not in_table:
            in_table = cells == NOTES_HEADER
            continue
        if cells is None or cells == NOTES_HEADER:
            continue
        if SEPARATOR_CELL_RE.match(cells[0]):
            continue
        date, item, note = cells
        notes.append(Note(date=date, item=item, note=note))
    return tuple(notes)
