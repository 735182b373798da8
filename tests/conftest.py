"""Shared fixtures: an upload directory of CVs and an in-memory shortlist service."""

import pytest

from shortlist_ai.ranking.shortlist_service import ShortlistService
from shortlist_ai.schemas.records import Application, Job
from shortlist_ai.services.document_store import LocalDocumentStore
from shortlist_ai.services.repositories import (
    InMemoryApplicationRepository,
    InMemoryCriteriaRepository,
    InMemoryJobRepository,
    InMemoryProfileRepository,
)

CVS = {
    "alice.txt": (
        "Alice Smith\n"
        "Skills: Java, SQL, Spring Boot\n"
        "6 years of experience building payment systems\n"
        "BSc Computer Science"
    ),
    "bob.txt": (
        "Bob Jones\n"
        "Skills: Java, HTML, CSS\n"
        "2 years of experience\n"
        "Diploma in IT"
    ),
    "carol.txt": (
        "Carol White\n"
        "PhD in Databases\n"
        "Skills: SQL, Oracle, Python\n"
        "10 years of experience"
    ),
}


@pytest.fixture
def upload_dir(tmp_path):
    d = tmp_path / "uploads"
    d.mkdir()
    for name, text in CVS.items():
        (d / name).write_text(text, encoding="utf-8")
    (d / "broken.docx").write_bytes(b"this is not a zip archive")
    return d


@pytest.fixture
def store(upload_dir):
    return LocalDocumentStore(upload_dir)


@pytest.fixture
def job():
    return Job(
        id=1,
        title="Backend Developer",
        description="Bachelor degree required. Build services in Java.",
        skills=["java", "sql"],
        years_experience=3,
    )


@pytest.fixture
def applications():
    return [
        Application(id=1, job_id=1, applicant_name="Alice", applicant_email="alice@example.com", cv_filename="alice.txt"),
        Application(id=2, job_id=1, applicant_name="Bob", applicant_email="bob@example.com", cv_filename="bob.txt"),
        Application(id=3, job_id=1, applicant_name="Carol", applicant_email="carol@example.com", cv_filename="carol.txt"),
        Application(
            id=4,
            job_id=1,
            applicant_name="Dave",
            applicant_email="dave@example.com",
            letter_filename="dave_letter.pdf",
            skills_summary="Java developer",
        ),
    ]


@pytest.fixture
def repos(job, applications):
    return {
        "jobs": InMemoryJobRepository([job]),
        "applications": InMemoryApplicationRepository(applications),
        "criteria": InMemoryCriteriaRepository(),
        "profiles": InMemoryProfileRepository(),
    }


@pytest.fixture
def service(repos, store):
    return ShortlistService(
        jobs=repos["jobs"],
        applications=repos["applications"],
        criteria=repos["criteria"],
        profiles=repos["profiles"],
        store=store,
    )
