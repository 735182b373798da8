"""Deterministic CV feature extraction: skills, years of experience, education, certifications.

Every heuristic is lexical (dictionary substring checks and regular expressions),
so the same text always yields the same profile. Nothing here raises: a heuristic
that fails degrades its field to absent and marks the profile Partial.
"""

import re
from typing import Callable, List, Optional, TypeVar

from shortlist_ai.config import (
    CERTIFICATION_TERMS,
    EXPERIENCE_REFERENCE_YEAR,
    MASTERS_EXCLUSIONS,
    SKILL_TERMS,
)
from shortlist_ai.schemas.cv_profile import EducationLevel, ExtractedProfile, ParsingStatus
from shortlist_ai.utils.helpers import deduplicate_casefold, split_section_line
from shortlist_ai.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

SKILLS_SECTION_RE = re.compile(r"skills?\s*:?\s*([^\n]{10,200})", re.IGNORECASE)
CERTS_SECTION_RE = re.compile(r"certifications?\s*:?\s*([^\n]{10,300})", re.IGNORECASE)

YEARS_EXPERIENCE_RE = re.compile(
    r"(\d+)\s*\+?\s*(?:-\s*\d+\s*)?years?\s+(?:of\s+)?experience", re.IGNORECASE
)
YEAR_RANGE_RE = re.compile(r"(\d{4})\s*[-–]\s*(\d{4}|present|current)", re.IGNORECASE)

PHD_RE = re.compile(r"\b(ph\.?d|doctorate|doctor of philosophy)\b")
MASTERS_RE = re.compile(r"\b(master(?:'s|’s)?\s+(?:of|degree)|msc|m\.sc|mba|m\.a|m\.phil)\b")
BACHELORS_RE = re.compile(r"\b(bachelor(?:'?s|’s)?|bsc|b\.sc|b\.a|ba|undergraduate|degree)\b")
DIPLOMA_TERMS = ("diploma", "hnd", "associate")
CERTIFICATE_TERMS = ("certificate", "certification")

# Characters inspected on each side of a Masters match for exclusion phrases
MASTERS_EXCLUSION_WINDOW = 10


def extract_skills(text: str) -> List[str]:
    """Dictionary terms found in the text plus the values of the first 'Skills:' line."""
    lower_text = text.lower()
    skills = [term for term in SKILL_TERMS if term.lower() in lower_text]
    match = SKILLS_SECTION_RE.search(text)
    if match:
        skills.extend(split_section_line(match.group(1), 3, 49))
    return deduplicate_casefold(skills)


def extract_years_of_experience(text: str, reference_year: int = EXPERIENCE_REFERENCE_YEAR) -> Optional[int]:
    """
    First 'N years of experience' phrase; otherwise the sum of 'YYYY-YYYY' /
    'YYYY-present' ranges. None when neither yields a positive number.
    """
    match = YEARS_EXPERIENCE_RE.search(text)
    if match:
        return int(match.group(1))

    total_years = 0
    for m in YEAR_RANGE_RE.finditer(text):
        start_year = int(m.group(1))
        end = m.group(2)
        end_year = int(end) if end.isdigit() else reference_year
        total_years += end_year - start_year
    return total_years if total_years > 0 else None


def _has_unexcluded_masters(lower_text: str) -> bool:
    """True if any Masters-pattern match is not surrounded by an exclusion phrase."""
    for m in MASTERS_RE.finditer(lower_text):
        start = max(0, m.start() - MASTERS_EXCLUSION_WINDOW)
        end = min(len(lower_text), m.end() + MASTERS_EXCLUSION_WINDOW)
        surrounding = lower_text[start:end]
        if not any(exclusion in surrounding for exclusion in MASTERS_EXCLUSIONS):
            return True
    return False


def extract_education_level(text: str) -> EducationLevel:
    """Single highest education level, checked in precedence order PhD > Masters > ... > Unknown."""
    lower_text = text.lower()
    if PHD_RE.search(lower_text):
        return EducationLevel.PHD
    if _has_unexcluded_masters(lower_text):
        return EducationLevel.MASTERS
    if BACHELORS_RE.search(lower_text):
        return EducationLevel.BACHELORS
    if any(term in lower_text for term in DIPLOMA_TERMS):
        return EducationLevel.DIPLOMA
    if any(term in lower_text for term in CERTIFICATE_TERMS):
        return EducationLevel.CERTIFICATE
    return EducationLevel.UNKNOWN


def extract_certifications(text: str) -> List[str]:
    """Dictionary certifications plus the values of the first 'Certifications:' line."""
    lower_text = text.lower()
    certifications = [cert for cert in CERTIFICATION_TERMS if cert.lower() in lower_text]
    match = CERTS_SECTION_RE.search(text)
    if match:
        certifications.extend(split_section_line(match.group(1), 4, 99))
    return deduplicate_casefold(certifications)


def _guarded(field: str, fn: Callable[[str], T], text: str, default: T, degraded: List[str]) -> T:
    try:
        return fn(text)
    except Exception as e:
        logger.exception("Extraction of %s failed: %s", field, e)
        degraded.append(field)
        return default


def extract(text: Optional[str]) -> ExtractedProfile:
    """
    Derive an ExtractedProfile from plain CV text. Never raises.
    Status is Success, or Partial when the text is empty or a heuristic had to be skipped.
    """
    text = text or ""
    if not text.strip():
        return ExtractedProfile(
            raw_text=text,
            parsing_status=ParsingStatus.PARTIAL,
            parsing_error="No extractable text in document",
        )

    degraded: List[str] = []
    profile = ExtractedProfile(
        skills=_guarded("skills", extract_skills, text, [], degraded),
        years_of_experience=_guarded("years_of_experience", extract_years_of_experience, text, None, degraded),
        education_level=_guarded("education_level", extract_education_level, text, EducationLevel.UNKNOWN, degraded),
        certifications=_guarded("certifications", extract_certifications, text, [], degraded),
        raw_text=text,
    )
    if degraded:
        profile.parsing_status = ParsingStatus.PARTIAL
        profile.parsing_error = "Could not extract: " + ", ".join(degraded)
    return profile
