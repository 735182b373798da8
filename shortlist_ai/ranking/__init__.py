"""Ranking: criteria resolution, multi-factor scoring and the shortlist run."""

from shortlist_ai.ranking.criteria_resolver import CriteriaResolver, detect_education_requirements
from shortlist_ai.ranking.scoring import score
from shortlist_ai.ranking.shortlist_service import ShortlistService, rank_results

__all__ = ["CriteriaResolver", "ShortlistService", "detect_education_requirements", "rank_results", "score"]
