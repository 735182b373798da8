"""Configuration loaded from environment variables."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def env_int(name: str, default: int) -> int:
    """Integer env value; a missing or malformed value gives the default."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


# Storage
UPLOAD_DIR: str = os.getenv("SHORTLIST_UPLOAD_DIR", "uploads")

# Shortlist run
DEFAULT_TOP_N: int = env_int("SHORTLIST_DEFAULT_TOP_N", 3)

# "present" / "current" in a date range counts up to this year
EXPERIENCE_REFERENCE_YEAR: int = env_int("SHORTLIST_REFERENCE_YEAR", 2026)

# Document extraction
EXTRACTION_TIMEOUT_SECONDS: float = env_float("SHORTLIST_EXTRACTION_TIMEOUT", 30.0)
EXTRACTION_CONCURRENCY: int = env_int("SHORTLIST_EXTRACTION_CONCURRENCY", 1)

# Logging
LOG_LEVEL: int = logging.getLevelName(os.getenv("SHORTLIST_LOG_LEVEL", "INFO").upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO

# Default scoring weights for synthesized criteria (not required to sum to 1.0)
DEFAULT_SKILLS_WEIGHT: float = 0.40
DEFAULT_EXPERIENCE_WEIGHT: float = 0.25
DEFAULT_EDUCATION_WEIGHT: float = 0.20
DEFAULT_KEYWORDS_WEIGHT: float = 0.15

# Centralized vocabularies for CV feature extraction.
# Matched as lower-cased substrings; keep them here, do not hardcode elsewhere.
SKILL_TERMS: tuple = (
    # Programming languages
    "java", "python", "javascript", "typescript", "c++", "c#", "ruby", "php", "swift", "kotlin",
    "golang", "rust", "scala", "matlab", "sql", "html", "css",
    # Frameworks & libraries
    "spring", "spring boot", "react", "angular", "vue", "node.js", "express", "django", "flask",
    "laravel", "rails", ".net", "asp.net", "hibernate", "jpa",
    # Databases
    "mysql", "postgresql", "mongodb", "oracle", "sql server", "redis", "cassandra", "dynamodb",
    # Cloud & DevOps
    "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "git", "ci/cd", "terraform",
    # SAP
    "SAP FICO", "SAP MM", "SAP SD", "SAP HANA", "SAP ABAP", "SAP BW", "SAP CRM", "SAP BASIS", "SAP B1",
    "SAP SuccessFactors", "SAP Ariba", "SAP S/4HANA", "SAP Fiori",
    # Practices & soft skills
    "rest api", "microservices", "agile", "scrum", "machine learning", "data analysis",
    "project management", "leadership", "communication",
)

CERTIFICATION_TERMS: tuple = (
    "pmp", "aws certified", "azure certified", "gcp certified", "cissp", "cisa", "cism",
    "comptia", "ccna", "ccnp", "ceh", "scrum master", "safe", "itil", "six sigma",
)

# Phrases that contain "master" without meaning a degree
MASTERS_EXCLUSIONS: tuple = (
    "scrum master", "web master", "headmaster", "mastered", "mastery", "postmaster",
)
