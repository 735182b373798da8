"""Per-job scoring configuration used by the shortlisting engine."""

from typing import List, Optional

from pydantic import BaseModel, Field

from shortlist_ai.config import (
    DEFAULT_EDUCATION_WEIGHT,
    DEFAULT_EXPERIENCE_WEIGHT,
    DEFAULT_KEYWORDS_WEIGHT,
    DEFAULT_SKILLS_WEIGHT,
)
from shortlist_ai.schemas.cv_profile import EducationLevel


class JobCriteria(BaseModel):
    """Requirements and weights for one job. Weights are multipliers and need not sum to 1.0."""

    job_id: int = Field(..., description="Job these criteria belong to")
    required_skills: List[str] = Field(default_factory=list, description="Must-have skills")
    preferred_skills: List[str] = Field(default_factory=list, description="Nice-to-have skills")
    minimum_years_experience: int = Field(default=0, ge=0, description="Experience floor in years")
    required_education_levels: List[EducationLevel] = Field(
        default_factory=list, description="Any of these levels satisfies the requirement"
    )
    keywords: List[str] = Field(default_factory=list, description="Tools, frameworks or certifications to look for")
    location: Optional[str] = Field(default=None, description="Location preference")
    skills_weight: float = Field(default=DEFAULT_SKILLS_WEIGHT, ge=0, description="Weight on skills matching")
    experience_weight: float = Field(default=DEFAULT_EXPERIENCE_WEIGHT, ge=0, description="Weight on experience")
    education_weight: float = Field(default=DEFAULT_EDUCATION_WEIGHT, ge=0, description="Weight on education")
    keywords_weight: float = Field(default=DEFAULT_KEYWORDS_WEIGHT, ge=0, description="Weight on keywords")
