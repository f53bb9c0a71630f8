from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire (what the editor stores)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(CamelModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linked_in: str = ""
    github: str = ""
    twitter: str = ""
    instagram: str = ""
    website: str = ""
    summary: str = ""


class EducationEntry(CamelModel):
    """Education entry in a resume."""
    degree: str = ""
    institution: str = ""
    year: str = ""  # YYYY or YYYY-YYYY
    gpa: str = ""


class ExperienceEntry(CamelModel):
    position: str = ""
    company: str = ""
    start_date: str = ""  # "Jan 2020"
    end_date: str = ""  # "Dec 2021" or "Present"
    description: str = ""


class ProjectEntry(CamelModel):
    name: str = ""
    description: str = ""
    link: str = ""
    technologies: str = ""


class ResumeData(CamelModel):
    """The editable resume document."""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education: List[EducationEntry] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)


class ParsedResume(ResumeData):
    confidence: int = Field(default=0, ge=0, le=100, description="0 (nothing recognized) to 100")


class ImportTextRequest(BaseModel):
    text: str = Field(..., description="Pasted resume or LinkedIn profile text")


class ApplyImportRequest(BaseModel):
    resume: ResumeData = Field(default_factory=ResumeData, description="Resume currently being edited")
    parsed: ParsedResume


class ValidationReport(BaseModel):
    valid: bool
    problems: List[str] = Field(default_factory=list)


class AddSkillRequest(BaseModel):
    resume: ResumeData
    skill: str


class RemoveSkillRequest(BaseModel):
    resume: ResumeData
    index: int = Field(..., description="Position of the skill to remove; out of range is a no-op")
