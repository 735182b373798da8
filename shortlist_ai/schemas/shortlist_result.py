"""Per-application outcome of one shortlist run (not persisted)."""

from pydantic import BaseModel, Field


class ShortlistResult(BaseModel):
    """Score and rationale for one application in a shortlist run."""

    application_id: int = Field(..., description="Scored application")
    applicant_name: str = Field(default="Unknown", description="Candidate display name")
    applicant_email: str = Field(default="", description="Candidate email")
    computed_score: float = Field(..., ge=0, le=100, description="Score 0-100")
    shortlisted: bool = Field(default=False, description="True for the top N of the run")
    reason: str = Field(default="", description="Human-readable rationale for the score")
