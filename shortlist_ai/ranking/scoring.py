"""Multi-factor candidate scoring: weighted skills, experience, education and keywords, with fallback."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from shortlist_ai.schemas.cv_profile import EducationLevel, ExtractedProfile, ParsingStatus
from shortlist_ai.schemas.job_criteria import JobCriteria
from shortlist_ai.schemas.records import Application, Job
from shortlist_ai.utils.helpers import lowered_set
from shortlist_ai.utils.logger import get_logger

logger = get_logger(__name__)

# Split of the skills sub-score between required and preferred skills
REQUIRED_SKILLS_SHARE = 0.7
PREFERRED_SKILLS_SHARE = 0.3

# Experience above the minimum is rewarded up to this multiple of it
EXPERIENCE_SATURATION = 2.0

UNKNOWN_FACTOR_SCORE = 0.5

FALLBACK_SKILLS_POINTS = 50.0
FALLBACK_CV_POINTS = 25.0
FALLBACK_LETTER_POINTS = 25.0

MAX_MATCHED_IN_REASON = 5


def _matched(wanted: Sequence[str], have: set[str]) -> List[str]:
    return [s for s in wanted if (s or "").strip().lower() in have]


def skills_match(
    candidate_skills: Sequence[str],
    required_skills: Sequence[str],
    preferred_skills: Sequence[str],
) -> float:
    """0.7 * required coverage + 0.3 * preferred coverage; an empty list earns its full share."""
    if not candidate_skills:
        return 0.0
    have = lowered_set(candidate_skills)
    score = 0.0
    if required_skills:
        score += REQUIRED_SKILLS_SHARE * len(_matched(required_skills, have)) / len(required_skills)
    else:
        score += REQUIRED_SKILLS_SHARE
    if preferred_skills:
        score += PREFERRED_SKILLS_SHARE * len(_matched(preferred_skills, have)) / len(preferred_skills)
    else:
        score += PREFERRED_SKILLS_SHARE
    return score


def experience_match(candidate_years: Optional[int], minimum_years: Optional[int]) -> float:
    """Linear credit below the minimum; above it, min(years/min, 2)/2."""
    if candidate_years is None:
        return UNKNOWN_FACTOR_SCORE
    if not minimum_years:
        return 1.0
    ratio = candidate_years / minimum_years
    if candidate_years >= minimum_years:
        return min(min(ratio, EXPERIENCE_SATURATION) / EXPERIENCE_SATURATION, 1.0)
    return max(0.0, ratio)


def education_match(candidate_level: Optional[EducationLevel], required_levels: Sequence[EducationLevel]) -> float:
    """Full credit when the candidate meets any required level, else rank / highest required rank."""
    if candidate_level is None or candidate_level == EducationLevel.UNKNOWN:
        return UNKNOWN_FACTOR_SCORE
    if not required_levels:
        return 1.0
    if any(candidate_level.rank >= required.rank for required in required_levels):
        return 1.0
    max_required_rank = max(required.rank for required in required_levels)
    return max(0.0, candidate_level.rank / max_required_rank)


def keyword_match(profile: ExtractedProfile, keywords: Sequence[str]) -> float:
    """Fraction of keywords present (exact, case-insensitive) among skills and certifications."""
    if not keywords:
        return 1.0
    have = lowered_set(profile.skills) | lowered_set(profile.certifications)
    return len(_matched(keywords, have)) / len(keywords)


def weighted_score(profile: ExtractedProfile, criteria: JobCriteria) -> float:
    """Weighted sum of the four sub-scores scaled to 0-100. Weights are applied as given."""
    score = (
        skills_match(profile.skills, criteria.required_skills, criteria.preferred_skills) * criteria.skills_weight
        + experience_match(profile.years_of_experience, criteria.minimum_years_experience) * criteria.experience_weight
        + education_match(profile.education_level, criteria.required_education_levels) * criteria.education_weight
        + keyword_match(profile, criteria.keywords) * criteria.keywords_weight
    )
    return max(0.0, min(score * 100, 100.0))


def fallback_score(skills_text: Optional[str], job_skills: Sequence[str], has_cv: bool, has_cover_letter: bool) -> float:
    """Degraded score without a usable profile: skill mentions in free text plus application completeness."""
    score = 0.0
    if job_skills and skills_text:
        lower_text = skills_text.lower()
        matches = sum(1 for s in job_skills if s.strip().lower() in lower_text)
        score += FALLBACK_SKILLS_POINTS * matches / len(job_skills)
    if has_cv:
        score += FALLBACK_CV_POINTS
    if has_cover_letter:
        score += FALLBACK_LETTER_POINTS
    return min(score, 100.0)


def build_reason(profile: Optional[ExtractedProfile], criteria: JobCriteria, score: float) -> str:
    """Deterministic explanation of a score."""
    parts = ["Score: %.1f/100." % score]

    if profile is None or not profile.is_usable:
        note = "CV parsing unavailable - basic scoring used."
        if profile is not None and profile.parsing_error:
            note = "CV parsing unavailable (%s) - basic scoring used." % profile.parsing_error
        parts.append(note)
        return " ".join(parts)

    if criteria.required_skills:
        matched = _matched(criteria.required_skills, lowered_set(profile.skills))[:MAX_MATCHED_IN_REASON]
        if matched:
            parts.append("Matched: %s." % ", ".join(matched))
    if profile.years_of_experience is not None:
        parts.append("%d years exp." % profile.years_of_experience)
    if profile.education_level != EducationLevel.UNKNOWN:
        parts.append("%s." % profile.education_level.value)
    if profile.parsing_status == ParsingStatus.PARTIAL:
        parts.append("CV parsing partial.")
    return " ".join(parts)


def score(
    profile: Optional[ExtractedProfile],
    criteria: JobCriteria,
    application: Optional[Application] = None,
    job: Optional[Job] = None,
) -> Tuple[float, str]:
    """
    Score one candidate against one job's criteria. Returns (score in [0, 100], rationale).
    Without a profile that has extracted skills, falls back to the application's
    free-text skills against the job's skill list plus CV / cover letter presence.
    """
    if profile is None or not profile.is_usable:
        app_label = application.id if application is not None else "?"
        logger.warning("No parsed CV data for application %s, using fallback scoring", app_label)
        job_skills = job.skills if job is not None else criteria.required_skills
        value = fallback_score(
            application.skills_summary if application is not None else None,
            job_skills,
            application.has_cv if application is not None else False,
            application.has_cover_letter if application is not None else False,
        )
    else:
        value = weighted_score(profile, criteria)
    return value, build_reason(profile, criteria, value)
