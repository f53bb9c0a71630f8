"""
Heuristic parser for pasted free-text resumes (LinkedIn exports, plain text CVs).

Single linear pass over the non-blank lines. Every line is first checked for
contact fields (name, email, phone, social links), then routed by the current
section. Section headers are plain keyword hits, e.g. "EXPERIENCE",
"Work History", "Technical Skills".

State is a section tag plus at most one open entry whose shape matches that
section. Every header flushes the open entry into its own list before the
section changes, so an entry can never land in the wrong list.

Confidence is fields_found / MAX_FIELDS, as a 0-100 integer, capped at 100.
Twitter links are stored but not counted.
"""

import logging
import re
from enum import Enum
from typing import List, Optional, Union

from resume_import.core.schemas import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    ProjectEntry,
)
from resume_import.core.validation import is_valid_email

logger = logging.getLogger(__name__)

MAX_FIELDS = 20
NAME_MAX_LENGTH = 50
SUMMARY_MIN_LENGTH = 50

# \d and \w spelled out as ASCII classes like the editor's browser regexes;
# \s stays Unicode so non-breaking spaces in pasted text still separate tokens
EMAIL_CANDIDATE_RE = re.compile(r"[A-Za-z0-9_.-]+@[A-Za-z0-9_.-]+\.[A-Za-z0-9_]+")
PHONE_RE = re.compile(r"\+?[0-9][0-9\s()-]{8,}")
YEAR_RE = re.compile(r"[0-9]{4}")
# [-–toTO] is a character class: hyphen, en dash, "t" or "o"
DATE_RANGE_RE = re.compile(r"([A-Za-z0-9_]+\s+[0-9]{4})\s*[-–toTO]\s*([A-Za-z0-9_]+\s+[0-9]{4}|(?i:present))")
EDUCATION_YEAR_RE = re.compile(r"[0-9]{4}(-[0-9]{4})?")
GPA_RE = re.compile(r"GPA", re.IGNORECASE)
DECIMAL_RE = re.compile(r"[0-9]\.[0-9]")
NUMBER_RUN_RE = re.compile(r"[0-9.]+")
SKILL_DELIMITERS_RE = re.compile(r"[,•·|;]")
ALL_DIGITS_RE = re.compile(r"[0-9]+")
# str.strip() keeps the byte order mark; browser trim() removes it
BOM = "\ufeff"


class Section(str, Enum):
    NONE = "none"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"


OpenItem = Union[ExperienceEntry, EducationEntry, ProjectEntry]


def detect_section_header(lower_line: str) -> Optional[Section]:
    """
    Map a lowercased line to the section it opens, or None.

    Order matters: "Profile Summary" is SUMMARY, "Technical Experience" is
    EXPERIENCE, "Technical Projects" is SKILLS.
    """
    if "summary" in lower_line or "about" in lower_line or "profile" in lower_line:
        return Section.SUMMARY
    if "experience" in lower_line or "work history" in lower_line:
        return Section.EXPERIENCE
    if "education" in lower_line:
        return Section.EDUCATION
    if "skills" in lower_line or "technical" in lower_line:
        return Section.SKILLS
    if "projects" in lower_line:
        return Section.PROJECTS
    return None


def trim_line(line: str) -> str:
    """Strip surrounding whitespace and byte order marks ('\\ufeff Jane ' -> 'Jane')."""
    return line.strip().strip(BOM).strip()


def split_skills(line: str) -> List[str]:
    """
    Split a skills line on , • · | ; and keep plausible skill names.

    Examples:
      'Python, Go; Rust•C++' -> ['Python', 'Go', 'Rust', 'C++']
      'C, 2019, Docker'      -> ['Docker']   (single letters and numbers dropped)
    """
    pieces = [p.strip() for p in SKILL_DELIMITERS_RE.split(line)]
    return [
        p for p in pieces
        if 1 < len(p) < 30 and not ALL_DIGITS_RE.fullmatch(p)
    ]


class _ParseState:
    """Accumulator owned by a single parse call."""

    def __init__(self) -> None:
        self.result = ParsedResume()
        self.section = Section.NONE
        self.item: Optional[OpenItem] = None
        self.fields_found = 0

    def flush(self) -> None:
        """Append the open entry to the list matching its type and close it."""
        item = self.item
        if item is None:
            return
        if isinstance(item, ExperienceEntry):
            self.result.experience.append(item)
        elif isinstance(item, EducationEntry):
            self.result.education.append(item)
        else:
            self.result.projects.append(item)
        logger.debug("Flushed %s: %r", type(item).__name__, item)
        self.item = None

    def open(self, item: OpenItem) -> None:
        self.flush()
        self.item = item

    def enter(self, section: Section) -> None:
        logger.debug(f"Section {self.section.value} -> {section.value}")
        self.flush()
        self.section = section


def _extract_contact_fields(state: _ParseState, index: int, line: str, lower: str) -> None:
    info = state.result.personal_info

    if index == 0 and len(line) < NAME_MAX_LENGTH and "@" not in line and "resume" not in lower:
        info.full_name = line
        state.fields_found += 1

    m = EMAIL_CANDIDATE_RE.search(line)
    if m and is_valid_email(m.group(0)):
        info.email = m.group(0)
        state.fields_found += 1

    m = PHONE_RE.search(line)
    if m:
        info.phone = m.group(0)
        state.fields_found += 1

    if "linkedin.com" in line:
        info.linked_in = line
        state.fields_found += 1
    elif "github.com" in line:
        info.github = line
        state.fields_found += 1
    elif "twitter.com" in line:
        # stored but not counted toward confidence
        info.twitter = line


def _route_summary(state: _ParseState, line: str) -> None:
    if len(line) > SUMMARY_MIN_LENGTH and not YEAR_RE.search(line):
        state.result.personal_info.summary += line + " "


def _route_experience(state: _ParseState, line: str, lower: str) -> None:
    item = state.item
    if YEAR_RE.search(line) and ("-" in line or "to" in line or "present" in lower):
        entry = ExperienceEntry()
        dates = DATE_RANGE_RE.search(line)
        if dates:
            entry.start_date = dates.group(1)
            entry.end_date = dates.group(2)
            state.fields_found += 1
        state.open(entry)
    elif item is not None and not item.position and len(line) > 5:
        item.position = line
    elif item is not None and not item.company and len(line) > 3:
        item.company = line
    elif item is not None:
        item.description += line + " "


def _route_education(state: _ParseState, line: str) -> None:
    item = state.item
    if YEAR_RE.search(line):
        entry = EducationEntry()
        m = EDUCATION_YEAR_RE.search(line)
        entry.year = m.group(0) if m else ""
        state.fields_found += 1
        state.open(entry)
    elif item is not None and not item.degree:
        item.degree = line
    elif item is not None and not item.institution:
        item.institution = line
    elif item is not None and (GPA_RE.search(line) or DECIMAL_RE.search(line)):
        m = NUMBER_RUN_RE.search(line)
        item.gpa = m.group(0) if m else ""


def _route_skills(state: _ParseState, line: str) -> None:
    skills = split_skills(line)
    state.result.skills.extend(skills)
    state.fields_found += len(skills)


def _route_projects(state: _ParseState, line: str) -> None:
    item = state.item
    if item is None or item.name:
        state.open(ProjectEntry(name=line))
    else:
        item.description += line + " "


def compute_confidence(fields_found: int) -> int:
    return min(round(fields_found / MAX_FIELDS * 100), 100)


def parse_free_text(text: str) -> ParsedResume:
    """
    Parse pasted resume text into a ParsedResume.

    Never raises: unrecognizable input yields empty fields and confidence 0.
    """
    lines = [trim_line(ln) for ln in (text or "").splitlines()]
    lines = [ln for ln in lines if ln]

    state = _ParseState()
    if not lines:
        return state.result

    for index, line in enumerate(lines):
        lower = line.lower()

        _extract_contact_fields(state, index, line, lower)

        header = detect_section_header(lower)
        if header is not None:
            state.enter(header)
        elif state.section is Section.SUMMARY:
            _route_summary(state, line)
        elif state.section is Section.EXPERIENCE:
            _route_experience(state, line, lower)
        elif state.section is Section.EDUCATION:
            _route_education(state, line)
        elif state.section is Section.SKILLS:
            _route_skills(state, line)
        elif state.section is Section.PROJECTS:
            _route_projects(state, line)

    state.flush()
    state.result.confidence = compute_confidence(state.fields_found)

    logger.debug(
        f"Parsed {len(lines)} lines: fields_found={state.fields_found}, "
        f"confidence={state.result.confidence}, experience={len(state.result.experience)}, "
        f"education={len(state.result.education)}, projects={len(state.result.projects)}, "
        f"skills={len(state.result.skills)}"
    )
    return state.result
