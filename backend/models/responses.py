from typing import Literal

from pydantic import BaseModel

from models.schemas.resume import ResumeRecord


class FieldViolation(BaseModel):
    field_path: str
    message: str

    def __str__(self) -> str:
        return f"{self.field_path}: {self.message}"


class ValidationResult(BaseModel):
    success: bool
    data: ResumeRecord | None = None
    errors: list[str] = []
    violations: list[FieldViolation] = []


ErrorKind = Literal[
    "empty_transcript",
    "no_structured_output",
    "malformed_output",
    "validation_failed",
    "service_error",
]


class ExtractionResult(BaseModel):
    success: bool
    data: ResumeRecord | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None
    errors: list[str] = []  # first-pass validation errors
    raw_text: str | None = None  # model output kept for diagnostics


class GenerationResponse(BaseModel):
    id: str
    title: str
    kind: Literal["resume"] = "resume"
    status: Literal["success", "degraded"]
    content: str  # JSON-serialized record (fallback record when degraded)
    message: str = ""
    errors: list[str] = []


class UpdateResult(BaseModel):
    content: str
    updated: bool = False
    message: str = ""


class PreviewResult(BaseModel):
    resume: dict
    valid: bool = False
    errors: list[str] = []
