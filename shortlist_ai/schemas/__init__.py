"""Schema exports."""

from .cv_profile import EducationLevel, ExtractedProfile, ParsingStatus
from .job_criteria import JobCriteria
from .records import Application, Job
from .shortlist_result import ShortlistResult

__all__ = [
    "Application",
    "EducationLevel",
    "ExtractedProfile",
    "Job",
    "JobCriteria",
    "ParsingStatus",
    "ShortlistResult",
]
