"""Canonical résumé record: the contract handed to renderers and storage.

Field names on the wire are camelCase (``personalInfo``, ``startDate``, ...);
Python attributes are snake_case. Required strings use custom error messages so
that violations read naturally when surfaced to the user.
"""

import re
from typing import Annotated

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _required(message: str) -> AfterValidator:
    def check(value: str) -> str:
        if not value:
            raise PydanticCustomError("required", message)
        return value

    return AfterValidator(check)


def _min_items(message: str) -> AfterValidator:
    def check(value: list[str]) -> list[str]:
        if not value:
            raise PydanticCustomError("too_short", message)
        return value

    return AfterValidator(check)


def _check_email(value: str) -> str:
    if not EMAIL_RE.fullmatch(value):
        raise PydanticCustomError("email", "Valid email is required")
    return value


def _check_url(value: str | None) -> str | None:
    """URLs are syntax-checked but kept verbatim; empty string means absent."""
    if not value:
        return value
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url", "Invalid url") from None
    return value


def _check_summary(value: str) -> str:
    if len(value) < 10:
        raise PydanticCustomError("too_short", "Summary should be at least 10 characters")
    return value


OptionalUrl = Annotated[str | None, AfterValidator(_check_url)]


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(_WireModel):
    name: Annotated[str, _required("Name is required")]
    email: Annotated[str, AfterValidator(_check_email)]
    phone: str | None = None
    location: str | None = None
    linkedin: OptionalUrl = None
    website: OptionalUrl = None


class Experience(_WireModel):
    title: Annotated[str, _required("Job title is required")]
    company: Annotated[str, _required("Company name is required")]
    location: str | None = None
    start_date: Annotated[str, _required("Start date is required")]
    end_date: str | None = None  # "Present" for current positions
    description: Annotated[list[str], _min_items("At least one description point is required")]


class Education(_WireModel):
    degree: Annotated[str, _required("Degree is required")]
    institution: Annotated[str, _required("Institution is required")]
    location: str | None = None
    graduation_date: str | None = None
    gpa: str | None = None


class SkillCategory(_WireModel):
    category: Annotated[str, _required("Skill category is required")]
    items: Annotated[list[str], _min_items("At least one skill is required")]


class Project(_WireModel):
    name: Annotated[str, _required("Project name is required")]
    description: Annotated[str, _required("Project description is required")]
    technologies: list[str] | None = None
    url: OptionalUrl = None


class Certification(_WireModel):
    name: Annotated[str, _required("Certification name is required")]
    issuer: Annotated[str, _required("Issuer is required")]
    date: str | None = None


class ResumeRecord(_WireModel):
    """A validated résumé.

    Instances only exist after a candidate passed validation, so consumers
    never re-check the shape.
    """
    personal_info: PersonalInfo
    summary: Annotated[str, AfterValidator(_check_summary)]
    experience: list[Experience]
    education: list[Education]
    skills: list[SkillCategory]
    projects: list[Project] | None = None
    certifications: list[Certification] | None = None

    def to_wire(self) -> dict:
        """Plain dict using the wire field names; absent optionals are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


# Baseline used to fill whatever a candidate is missing.
DEFAULT_RESUME_DATA: dict = {
    "personalInfo": {
        "name": "",
        "email": "",
        "phone": "",
        "location": "",
        "linkedin": "",
        "website": "",
    },
    "summary": "",
    "experience": [],
    "education": [],
    "skills": [],
    "projects": [],
    "certifications": [],
}

FALLBACK_NAME = "Resume Generation Failed"
GENERATION_FAILED_SUMMARY = (
    "There was an error generating your resume. "
    "Please try again or provide more information in the conversation."
)
LOAD_FAILED_SUMMARY = (
    "There was an error loading your resume data. Please try regenerating the resume."
)
