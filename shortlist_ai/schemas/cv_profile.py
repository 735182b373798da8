"""Structured profile extracted from an uploaded resume (PDF/DOCX/text)."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class EducationLevel(str, Enum):
    """Highest education level, strictly ordered Unknown < Certificate < ... < PhD."""

    UNKNOWN = "Unknown"
    CERTIFICATE = "Certificate"
    DIPLOMA = "Diploma"
    BACHELORS = "Bachelors"
    MASTERS = "Masters"
    PHD = "PhD"

    @property
    def rank(self) -> int:
        return _EDUCATION_ORDER.index(self)

    def __lt__(self, other):
        if not isinstance(other, EducationLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, EducationLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, EducationLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, EducationLevel):
            return NotImplemented
        return self.rank >= other.rank


_EDUCATION_ORDER = list(EducationLevel)


class ParsingStatus(str, Enum):
    SUCCESS = "Success"
    FAILED = "Failed"
    PARTIAL = "Partial"


class ExtractedProfile(BaseModel):
    """Deterministic CV features; cached per application and overwritten on forced refresh."""

    application_id: Optional[int] = Field(default=None, description="Owning application when cached")
    skills: List[str] = Field(default_factory=list, description="Detected skills, original casing for display")
    years_of_experience: Optional[int] = Field(default=None, description="Years of experience; None when not found")
    education_level: EducationLevel = Field(default=EducationLevel.UNKNOWN, description="Single highest level detected")
    certifications: List[str] = Field(default_factory=list, description="Detected certifications")
    raw_text: str = Field(default="", description="Extracted document text, kept for audit")
    parsing_status: ParsingStatus = Field(default=ParsingStatus.SUCCESS, description="Outcome of parsing")
    parsing_error: Optional[str] = Field(default=None, description="Why parsing failed or was partial")

    @classmethod
    def failed(cls, error: str, application_id: Optional[int] = None, raw_text: str = "") -> "ExtractedProfile":
        """A profile with every extracted field empty, carrying the failure reason."""
        return cls(
            application_id=application_id,
            raw_text=raw_text,
            parsing_status=ParsingStatus.FAILED,
            parsing_error=error,
        )

    @property
    def is_usable(self) -> bool:
        """Full scoring needs at least one extracted skill."""
        return bool(self.skills)
