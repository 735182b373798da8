"""Job and application records handed to the engine by the persistence layer."""

from typing import List, Optional

from pydantic import BaseModel, Field


class Job(BaseModel):
    """A job opening as stored by the hiring system."""

    id: int = Field(..., description="Job identifier")
    title: str = Field(default="", description="Job title")
    description: str = Field(default="", description="Full job description")
    skills: List[str] = Field(default_factory=list, description="Skills listed on the job")
    years_experience: Optional[int] = Field(default=None, ge=0, description="Stated experience requirement")
    location: Optional[str] = Field(default=None, description="Job location")


class Application(BaseModel):
    """One candidate's application to one job."""

    id: int = Field(..., description="Application identifier")
    job_id: int = Field(..., description="Job applied to")
    applicant_name: str = Field(default="Unknown", description="Candidate display name")
    applicant_email: str = Field(default="", description="Candidate email")
    cv_filename: Optional[str] = Field(default=None, description="Stored CV document, if uploaded")
    letter_filename: Optional[str] = Field(default=None, description="Stored cover letter, if uploaded")
    skills_summary: Optional[str] = Field(default=None, description="Free-text skills typed by the applicant")
    shortlisted: bool = Field(default=False, description="Only persisted outcome of a shortlist run")

    @property
    def has_cv(self) -> bool:
        return bool(self.cv_filename)

    @property
    def has_cover_letter(self) -> bool:
        return bool(self.letter_filename)
