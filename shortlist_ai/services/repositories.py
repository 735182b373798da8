"""Persistence seams used by the shortlisting engine, with in-memory implementations."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from shortlist_ai.schemas.cv_profile import ExtractedProfile
from shortlist_ai.schemas.job_criteria import JobCriteria
from shortlist_ai.schemas.records import Application, Job


class JobRepository(ABC):
    @abstractmethod
    def get(self, job_id: int) -> Optional[Job]:
        ...


class ApplicationRepository(ABC):
    @abstractmethod
    def list_by_job(self, job_id: int) -> List[Application]:
        """Applications for a job in a stable order (submission order)."""
        ...

    @abstractmethod
    def get(self, application_id: int) -> Optional[Application]:
        ...

    @abstractmethod
    def save(self, application: Application) -> Application:
        ...

    @abstractmethod
    def set_shortlisted(self, application_id: int, value: bool) -> None:
        ...


class CriteriaRepository(ABC):
    @abstractmethod
    def get_by_job(self, job_id: int) -> Optional[JobCriteria]:
        ...

    @abstractmethod
    def save(self, criteria: JobCriteria) -> JobCriteria:
        ...


class ProfileRepository(ABC):
    @abstractmethod
    def get_by_application(self, application_id: int) -> Optional[ExtractedProfile]:
        ...

    @abstractmethod
    def save(self, profile: ExtractedProfile) -> ExtractedProfile:
        """Insert or overwrite the profile keyed by its application_id."""
        ...


class InMemoryJobRepository(JobRepository):
    def __init__(self, jobs: Iterable[Job] = ()) -> None:
        self._jobs: Dict[int, Job] = {j.id: j for j in jobs}

    def add(self, job: Job) -> Job:
        self._jobs[job.id] = job
        return job

    def get(self, job_id: int) -> Optional[Job]:
        return self._jobs.get(job_id)


class InMemoryApplicationRepository(ApplicationRepository):
    """Dict-backed store; insertion order is the listing order."""

    def __init__(self, applications: Iterable[Application] = ()) -> None:
        self._apps: Dict[int, Application] = {}
        for app in applications:
            self.save(app)

    def list_by_job(self, job_id: int) -> List[Application]:
        return [a.model_copy() for a in self._apps.values() if a.job_id == job_id]

    def get(self, application_id: int) -> Optional[Application]:
        app = self._apps.get(application_id)
        return app.model_copy() if app is not None else None

    def save(self, application: Application) -> Application:
        self._apps[application.id] = application.model_copy()
        return application

    def set_shortlisted(self, application_id: int, value: bool) -> None:
        app = self._apps.get(application_id)
        if app is None:
            raise KeyError(f"Application not found: {application_id}")
        self._apps[application_id] = app.model_copy(update={"shortlisted": value})


class InMemoryCriteriaRepository(CriteriaRepository):
    def __init__(self) -> None:
        self._by_job: Dict[int, JobCriteria] = {}

    def get_by_job(self, job_id: int) -> Optional[JobCriteria]:
        return self._by_job.get(job_id)

    def save(self, criteria: JobCriteria) -> JobCriteria:
        self._by_job[criteria.job_id] = criteria
        return criteria


class InMemoryProfileRepository(ProfileRepository):
    def __init__(self) -> None:
        self._by_app: Dict[int, ExtractedProfile] = {}

    def get_by_application(self, application_id: int) -> Optional[ExtractedProfile]:
        return self._by_app.get(application_id)

    def save(self, profile: ExtractedProfile) -> ExtractedProfile:
        if profile.application_id is None:
            raise ValueError("Profile must carry an application_id to be cached")
        self._by_app[profile.application_id] = profile
        return profile
