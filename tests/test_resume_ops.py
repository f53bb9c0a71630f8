from datetime import datetime, timedelta, timezone

from resume_import.core.resume_ops import (
    add_skill,
    apply_import,
    duplicate_resume,
    relative_time,
    remove_skill,
    validate_for_save,
)
from resume_import.core.schemas import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    PersonalInfo,
    ProjectEntry,
    ResumeData,
)


def _resume() -> ResumeData:
    return ResumeData(
        personal_info=PersonalInfo(full_name="Jane Doe", email="jane@x.com", location="Paris"),
        education=[EducationEntry(degree="BSc", year="2015")],
        experience=[ExperienceEntry(position="Engineer", company="Acme")],
        skills=["Python", "SQL"],
        projects=[ProjectEntry(name="Site", link="https://jane.dev")],
    )


def test_apply_import_overrides_personal_info_and_concatenates_lists():
    current = _resume()
    parsed = ParsedResume(
        personal_info=PersonalInfo(full_name="J. Doe", email="j@y.org"),
        experience=[ExperienceEntry(position="Lead", company="Globex")],
        education=[EducationEntry(degree="MSc", year="2019")],
        skills=["SQL", "Go", "Go"],
        projects=[ProjectEntry(name="CLI")],
        confidence=40,
    )

    merged = apply_import(current, parsed)

    assert merged.personal_info.full_name == "J. Doe"
    assert merged.personal_info.email == "j@y.org"
    assert merged.personal_info.location == ""
    assert [e.company for e in merged.experience] == ["Acme", "Globex"]
    assert [e.degree for e in merged.education] == ["BSc", "MSc"]
    assert [p.name for p in merged.projects] == ["Site", "CLI"]
    assert merged.skills == ["Python", "SQL", "Go"]


def test_apply_import_does_not_mutate_inputs():
    current = _resume()
    parsed = ParsedResume(experience=[ExperienceEntry(position="Lead")])

    merged = apply_import(current, parsed)
    merged.experience[0].company = "Changed"
    merged.experience[1].company = "Changed"

    assert current.experience[0].company == "Acme"
    assert parsed.experience[0].company == ""
    assert len(current.experience) == 1


def test_duplicate_resume_marks_copy_and_deep_copies():
    original = _resume()
    copy = duplicate_resume(original)

    assert copy.personal_info.full_name == "Jane Doe (Copy)"
    assert original.personal_info.full_name == "Jane Doe"
    copy.skills.append("Rust")
    copy.experience[0].company = "Other"
    assert original.skills == ["Python", "SQL"]
    assert original.experience[0].company == "Acme"


def test_add_skill_trims_and_escapes():
    data = add_skill(_resume(), "  <b>Go</b> ")
    assert data.skills[-1] == "&lt;b&gt;Go&lt;/b&gt;"


def test_add_blank_skill_is_ignored():
    assert add_skill(_resume(), "   ").skills == ["Python", "SQL"]


def test_remove_skill_by_index():
    assert remove_skill(_resume(), 0).skills == ["SQL"]
    assert remove_skill(_resume(), 9).skills == ["Python", "SQL"]


def test_validate_for_save():
    assert validate_for_save(_resume()) == []

    bad = _resume()
    bad.personal_info.email = "not-an-email"
    bad.personal_info.phone = "12"
    bad.projects[0].link = "jane dot dev"
    problems = validate_for_save(bad)
    assert problems[0] == "Valid email required"
    assert len(problems) == 3


def test_relative_time():
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    assert relative_time(None, now) == ""
    assert relative_time(now - timedelta(seconds=30), now) == "just now"
    assert relative_time(now - timedelta(minutes=5), now) == "5m ago"
    assert relative_time(now - timedelta(hours=3), now) == "3h ago"
    assert relative_time(now - timedelta(days=2), now) == "2d ago"
    # naive timestamps are treated as UTC
    assert relative_time(datetime(2024, 5, 1, 11, 0), now) == "1h ago"
