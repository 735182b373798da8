"""Service exports: document store and persistence seams."""

from .document_store import DocumentStore, LocalDocumentStore
from .repositories import (
    ApplicationRepository,
    CriteriaRepository,
    InMemoryApplicationRepository,
    InMemoryCriteriaRepository,
    InMemoryJobRepository,
    InMemoryProfileRepository,
    JobRepository,
    ProfileRepository,
)

__all__ = [
    "ApplicationRepository",
    "CriteriaRepository",
    "DocumentStore",
    "InMemoryApplicationRepository",
    "InMemoryCriteriaRepository",
    "InMemoryJobRepository",
    "InMemoryProfileRepository",
    "JobRepository",
    "LocalDocumentStore",
    "ProfileRepository",
]
