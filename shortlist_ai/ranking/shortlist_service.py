"""Shortlist run: reset prior flags, resolve criteria, re-parse and score every CV, rank, flag top N."""

from __future__ import annotations

import asyncio
from typing import Any, List, Optional

from shortlist_ai.config import DEFAULT_TOP_N, EXTRACTION_CONCURRENCY, EXTRACTION_TIMEOUT_SECONDS
from shortlist_ai.cv_pipeline.cv_parser import build_profile, extract_features, parse_and_save_profile
from shortlist_ai.errors import JobNotFound
from shortlist_ai.ranking.criteria_resolver import CriteriaResolver
from shortlist_ai.ranking.scoring import score
from shortlist_ai.schemas.cv_profile import ExtractedProfile
from shortlist_ai.schemas.job_criteria import JobCriteria
from shortlist_ai.schemas.records import Application, Job
from shortlist_ai.schemas.shortlist_result import ShortlistResult
from shortlist_ai.services.document_store import DocumentStore
from shortlist_ai.services.repositories import (
    ApplicationRepository,
    CriteriaRepository,
    JobRepository,
    ProfileRepository,
)
from shortlist_ai.utils.logger import get_logger

logger = get_logger(__name__)


def rank_results(results: List[ShortlistResult], top_n: int) -> List[ShortlistResult]:
    """
    Sort by score descending and flag the first min(top_n, len) as shortlisted.
    The sort is stable, so ties keep application order. top_n <= 0 selects nothing.
    """
    ranked = sorted(results, key=lambda r: r.computed_score, reverse=True)
    selected = max(0, min(top_n, len(ranked)))
    return [r.model_copy(update={"shortlisted": i < selected}) for i, r in enumerate(ranked)]


class ShortlistService:
    """Scores every application of a job and persists the top-N shortlisted flags."""

    def __init__(
        self,
        jobs: JobRepository,
        applications: ApplicationRepository,
        criteria: CriteriaRepository,
        profiles: ProfileRepository,
        store: DocumentStore,
        extraction_timeout: float = EXTRACTION_TIMEOUT_SECONDS,
        extraction_concurrency: int = EXTRACTION_CONCURRENCY,
    ) -> None:
        self._jobs = jobs
        self._applications = applications
        self._profiles = profiles
        self._store = store
        self._resolver = CriteriaResolver(criteria)
        self._timeout = extraction_timeout
        self._concurrency = max(1, extraction_concurrency)

    def _get_job(self, job_id: int) -> Job:
        job = self._jobs.get(job_id)
        if job is None:
            raise JobNotFound(job_id)
        return job

    # -- shortlist run -------------------------------------------------

    def shortlist(self, job_id: int, top_n: Optional[int] = None) -> List[ShortlistResult]:
        """
        Run one shortlist for a job and return every application ranked, top N flagged.
        Safe to call from sync code; use shortlist_async inside a running event loop.
        """
        loop = asyncio.new_event_loop()
        try:
            return loop.run_until_complete(self.shortlist_async(job_id, top_n))
        finally:
            loop.close()

    async def shortlist_async(self, job_id: int, top_n: Optional[int] = None) -> List[ShortlistResult]:
        n = DEFAULT_TOP_N if top_n is None else top_n
        job = self._get_job(job_id)
        applications = self._applications.list_by_job(job_id)
        logger.info("Shortlisting %s applications for job %s, selecting top %s", len(applications), job_id, n)

        self._reset_prior(applications)
        criteria = self._resolver.resolve(job)
        if not applications:
            return []

        sem = asyncio.Semaphore(self._concurrency)
        results = await asyncio.gather(
            *[self._score_application(app, job, criteria, sem) for app in applications]
        )
        ranked = rank_results(list(results), n)
        self._persist(ranked)

        logger.info(
            "Shortlisting complete for job %s. Top score: %s",
            job_id,
            ranked[0].computed_score if ranked else 0,
        )
        return ranked

    def _reset_prior(self, applications: List[Application]) -> None:
        for app in applications:
            if app.shortlisted:
                self._applications.set_shortlisted(app.id, False)

    async def _refresh_profile(self, app: Application, sem: asyncio.Semaphore) -> ExtractedProfile:
        """
        Always re-parse during a shortlist run; the cached profile is overwritten.
        A timed-out parse gives up its slot while its worker thread runs on, so stuck
        documents are not counted against the concurrency limit.
        """
        async with sem:
            try:
                profile = await asyncio.wait_for(
                    asyncio.to_thread(build_profile, app, self._store),
                    timeout=self._timeout,
                )
            except asyncio.TimeoutError:
                logger.error("CV extraction timed out for application %s after %ss", app.id, self._timeout)
                profile = ExtractedProfile.failed(
                    f"CV extraction timed out after {self._timeout}s", application_id=app.id
                )
        return self._profiles.save(profile)

    async def _score_application(
        self,
        app: Application,
        job: Job,
        criteria: JobCriteria,
        sem: asyncio.Semaphore,
    ) -> ShortlistResult:
        try:
            logger.info("Updating CV analysis for application %s", app.id)
            profile = await self._refresh_profile(app, sem)
            value, reason = score(profile, criteria, app, job)
            return ShortlistResult(
                application_id=app.id,
                applicant_name=app.applicant_name,
                applicant_email=app.applicant_email,
                computed_score=value,
                reason=reason,
            )
        except Exception as e:
            logger.exception("Error scoring application %s", app.id)
            return ShortlistResult(
                application_id=app.id,
                applicant_name=app.applicant_name,
                applicant_email=app.applicant_email,
                computed_score=0.0,
                reason=f"Error scoring application: {e}",
            )

    def _persist(self, ranked: List[ShortlistResult]) -> None:
        for result in ranked:
            if result.shortlisted:
                self._applications.set_shortlisted(result.application_id, True)

    def shortlisted_ids(self, job_id: int, top_n: Optional[int] = None) -> List[int]:
        """Run a shortlist and return only the selected application ids, best first."""
        return [r.application_id for r in self.shortlist(job_id, top_n) if r.shortlisted]

    # -- single-application operations -----------------------------------

    def submit_application(self, application: Application) -> Application:
        """
        Store a new application and parse its CV into the profile cache.
        Parsing uses the cache (no forced refresh) and never fails the submission.
        """
        saved = self._applications.save(application)
        if saved.cv_filename:
            try:
                logger.info("Parsing CV for application %s", saved.id)
                parse_and_save_profile(saved, self._store, self._profiles, force_refresh=False)
            except Exception:
                logger.exception("Failed to parse CV for application %s, will retry during shortlisting", saved.id)
        return saved

    def toggle_shortlist(self, application_id: int) -> bool:
        """Manually flip one application's shortlisted flag; returns the new state."""
        app = self._applications.get(application_id)
        if app is None:
            raise KeyError(f"Application not found: {application_id}")
        new_state = not app.shortlisted
        self._applications.set_shortlisted(application_id, new_state)
        logger.info("Application %s shortlisted status toggled to %s", application_id, new_state)
        return new_state

    def extract_features(self, filename: str) -> ExtractedProfile:
        return extract_features(filename, self._store)

    # -- criteria --------------------------------------------------------

    def criteria_for(self, job_id: int) -> JobCriteria:
        return self._resolver.resolve(self._get_job(job_id))

    def update_criteria(self, job_id: int, **changes: Any) -> JobCriteria:
        return self._resolver.update(self._get_job(job_id), **changes)
