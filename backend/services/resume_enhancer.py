"""Deterministic post-validation normalization of résumé records."""

import re

from models.schemas.resume import Education, Experience, ResumeRecord

BULLET = "•"
_BULLET_PREFIXES = (BULLET, "-")

CURRENT_END_DATES = {"present", "current"}

_MONTH_MAP = {
    "jan": 1, "january": 1, "feb": 2, "february": 2, "mar": 3, "march": 3,
    "apr": 4, "april": 4, "may": 5, "jun": 6, "june": 6,
    "jul": 7, "july": 7, "aug": 8, "august": 8, "sep": 9, "sept": 9,
    "september": 9, "oct": 10, "october": 10, "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

# "2020-05" / "2020-05-14"
ISO_DATE_RE = re.compile(r"(\d{4})-(\d{1,2})(?:-\d{1,2})?")
# "05/2020" / "05/14/2020"
SLASH_DATE_RE = re.compile(r"(\d{1,2})/(?:\d{1,2}/)?(\d{4})")

UNKNOWN_DATE = (0, 0)


def parse_resume_date(date_str: str | None) -> tuple[int, int]:
    """Parse a résumé date into (year, month). Unparsable input gives (0, 0)."""
    if not date_str:
        return UNKNOWN_DATE
    date_str = date_str.strip().rstrip(".")

    m = ISO_DATE_RE.fullmatch(date_str)
    if m:
        year, month = int(m.group(1)), int(m.group(2))
        return (year, month) if 1 <= month <= 12 else UNKNOWN_DATE

    m = SLASH_DATE_RE.fullmatch(date_str)
    if m:
        month, year = int(m.group(1)), int(m.group(2))
        return (year, month) if 1 <= month <= 12 else UNKNOWN_DATE

    # "Month Year", "Mon. Year", "Month, Year"
    parts = date_str.replace(",", " ").split()
    if len(parts) == 2:
        month_str = parts[0].lower().rstrip(".")
        if month_str in _MONTH_MAP and parts[1].isdigit():
            return int(parts[1]), _MONTH_MAP[month_str]

    # Bare year
    if date_str.isdigit() and len(date_str) == 4:
        return int(date_str), 1

    return UNKNOWN_DATE


def _is_current(exp: Experience) -> bool:
    """A missing end date is an ongoing position, as rendered ("... - Present")."""
    end = (exp.end_date or "").strip()
    return not end or end.lower() in CURRENT_END_DATES


def _experience_sort_key(exp: Experience) -> tuple:
    current = _is_current(exp)
    end = UNKNOWN_DATE if current else parse_resume_date(exp.end_date)
    return (current, end, parse_resume_date(exp.start_date))


def _education_sort_key(edu: Education) -> tuple:
    has_date = bool(edu.graduation_date)
    return (has_date, parse_resume_date(edu.graduation_date))


def format_bullet(line: str) -> str:
    return line if line.startswith(_BULLET_PREFIXES) else f"{BULLET} {line}"


def enhance_resume(record: ResumeRecord) -> ResumeRecord:
    """Bullet-format descriptions and order experience/education most recent first.

    Sorting is stable, so entries with equal keys keep their relative order.
    The input record is not modified.
    """
    experience = [
        exp.model_copy(update={"description": [format_bullet(d) for d in exp.description]})
        for exp in record.experience
    ]
    experience = sorted(experience, key=_experience_sort_key, reverse=True)
    education = sorted(record.education, key=_education_sort_key, reverse=True)

    return record.model_copy(update={"experience": experience, "education": education})


def serialize_resume(record: ResumeRecord) -> str:
    """JSON form used for storage and transport: wire field names, nothing added."""
    return record.model_dump_json(by_alias=True, exclude_none=True, indent=2)
