from datetime import datetime, timezone
from typing import List, Optional

from resume_import.core.schemas import ParsedResume, PersonalInfo, ResumeData
from resume_import.core.validation import is_valid_email, is_valid_phone, is_valid_url, sanitize_html


def apply_import(current: ResumeData, parsed: ParsedResume) -> ResumeData:
    """
    Merge an import result into the resume being edited.

    - personal info: imported values win, empty ones included
    - education / experience / projects: existing entries first, then imported
    - skills: union, first-seen order, duplicates dropped
    Neither input is modified.
    """
    personal = PersonalInfo(
        **{**current.personal_info.model_dump(), **parsed.personal_info.model_dump()}
    )

    skills: List[str] = []
    seen = set()
    for skill in [*current.skills, *parsed.skills]:
        if skill not in seen:
            skills.append(skill)
            seen.add(skill)

    return ResumeData(
        personal_info=personal,
        education=[e.model_copy() for e in [*current.education, *parsed.education]],
        experience=[e.model_copy() for e in [*current.experience, *parsed.experience]],
        skills=skills,
        projects=[p.model_copy() for p in [*current.projects, *parsed.projects]],
    )


def duplicate_resume(data: ResumeData) -> ResumeData:
    copy = data.model_copy(deep=True)
    copy.personal_info.full_name = f"{data.personal_info.full_name} (Copy)"
    return copy


def add_skill(data: ResumeData, skill: str) -> ResumeData:
    """Return a copy with the trimmed, escaped skill appended. Blank skills are ignored."""
    skill = (skill or "").strip()
    copy = data.model_copy(deep=True)
    if skill:
        copy.skills.append(sanitize_html(skill))
    return copy


def remove_skill(data: ResumeData, index: int) -> ResumeData:
    copy = data.model_copy(deep=True)
    copy.skills = [s for i, s in enumerate(copy.skills) if i != index]
    return copy


def validate_for_save(data: ResumeData) -> List[str]:
    """
    Problems that block saving. Only a valid email is mandatory; optional
    fields are reported only when filled in with something malformed.
    """
    info = data.personal_info
    problems: List[str] = []

    if not is_valid_email(info.email):
        problems.append("Valid email required")
    if info.phone and not is_valid_phone(info.phone):
        problems.append(f"Invalid phone number: {info.phone}")
    if info.website and not is_valid_url(info.website):
        problems.append(f"Invalid website URL: {info.website}")
    for project in data.projects:
        if project.link and not is_valid_url(project.link):
            problems.append(f"Invalid link for project '{project.name}': {project.link}")

    return problems


def relative_time(moment: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Short "last saved" label.

    Examples (now - moment):
      30s -> 'just now', 5m -> '5m ago', 3h -> '3h ago', 2 days -> '2d ago'
    """
    if moment is None:
        return ""
    if now is None:
        now = datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = int((now - moment).total_seconds())
    if seconds < 60:
        return "just now"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"
