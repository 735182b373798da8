"""Obtain a job's scoring criteria, synthesizing defaults from the job on first use."""

import re
from typing import Any, List

from shortlist_ai.schemas.cv_profile import EducationLevel
from shortlist_ai.schemas.job_criteria import JobCriteria
from shortlist_ai.schemas.records import Job
from shortlist_ai.services.repositories import CriteriaRepository
from shortlist_ai.utils.logger import get_logger

logger = get_logger(__name__)

# Every matching level is reported, highest first
JOB_EDUCATION_PATTERNS = (
    (EducationLevel.PHD, re.compile(r"\b(phd|ph\.d|doctorate)\b")),
    (EducationLevel.MASTERS, re.compile(r"\b(masters?|msc|m\.sc|mba)\b")),
    (EducationLevel.BACHELORS, re.compile(r"\b(bachelors?|bsc|b\.sc|undergraduate|degree)\b")),
    (EducationLevel.DIPLOMA, re.compile(r"\b(diploma|hnd)\b")),
)


def detect_education_requirements(text: str) -> List[EducationLevel]:
    """All education levels mentioned in a job description, unlike the single-winner CV check."""
    if not text:
        return []
    lower = text.lower()
    return [level for level, pattern in JOB_EDUCATION_PATTERNS if pattern.search(lower)]


def default_criteria(job: Job) -> JobCriteria:
    """Criteria derived from the job's own skills, experience requirement and description."""
    detected = detect_education_requirements(f"{job.description or ''} {job.title or ''}")
    if detected:
        logger.info("Detected education requirements for job %s: %s", job.id, [d.value for d in detected])
    return JobCriteria(
        job_id=job.id,
        required_skills=list(job.skills or []),
        minimum_years_experience=job.years_experience or 0,
        required_education_levels=detected,
        location=job.location,
    )


class CriteriaResolver:
    """Reads criteria for a job, creating and persisting defaults the first time."""

    def __init__(self, criteria: CriteriaRepository) -> None:
        self._criteria = criteria

    def resolve(self, job: Job) -> JobCriteria:
        existing = self._criteria.get_by_job(job.id)
        if existing is not None:
            return existing
        logger.info("Creating default criteria for job %s", job.id)
        return self._criteria.save(default_criteria(job))

    def update(self, job: Job, **changes: Any) -> JobCriteria:
        """
        Explicitly edit a job's criteria (creating defaults first if needed).
        Changes are re-validated, so unknown fields or negative weights raise pydantic.ValidationError.
        """
        current = self.resolve(job)
        data = current.model_dump()
        unknown = set(changes) - set(data)
        if unknown:
            raise ValueError(f"Unknown criteria fields: {sorted(unknown)}")
        data.update(changes)
        data["job_id"] = job.id
        updated = JobCriteria.model_validate(data)
        logger.info("Updated criteria for job %s: %s", job.id, sorted(changes))
        return self._criteria.save(updated)
