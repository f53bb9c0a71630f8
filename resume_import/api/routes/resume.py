from fastapi import APIRouter

from resume_import.core.resume_ops import add_skill, duplicate_resume, remove_skill, validate_for_save
from resume_import.core.schemas import AddSkillRequest, RemoveSkillRequest, ResumeData, ValidationReport

router = APIRouter(prefix="/resume", tags=["resume"])


@router.post("/duplicate", response_model=ResumeData, summary="Duplicate Resume")
def duplicate(body: ResumeData):
    return duplicate_resume(body)


@router.post("/validate", response_model=ValidationReport, summary="Validate Before Save")
def validate(body: ResumeData):
    """Check the fields the editor requires before a resume can be saved."""
    problems = validate_for_save(body)
    return ValidationReport(valid=not problems, problems=problems)


@router.post("/skills/add", response_model=ResumeData, summary="Add Skill")
def skills_add(body: AddSkillRequest):
    """Append a trimmed, HTML-escaped skill. Blank skills leave the resume unchanged."""
    return add_skill(body.resume, body.skill)


@router.post("/skills/remove", response_model=ResumeData, summary="Remove Skill")
def skills_remove(body: RemoveSkillRequest):
    return remove_skill(body.resume, body.index)
