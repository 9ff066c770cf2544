"""Pydantic contracts for the résumé record."""

from models.schemas.resume import (
    Certification,
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeRecord,
    SkillCategory,
)

__all__ = [
    "Certification",
    "Education",
    "Experience",
    "PersonalInfo",
    "Project",
    "ResumeRecord",
    "SkillCategory",
]
