"""CV parser: stored document -> ExtractedProfile, with a per-application profile cache."""

from typing import Optional

from shortlist_ai.cv_pipeline.feature_extractor import extract
from shortlist_ai.cv_pipeline.text_extractor import read_document_text
from shortlist_ai.errors import DocumentNotFound, ExtractionFailed
from shortlist_ai.schemas.cv_profile import ExtractedProfile
from shortlist_ai.schemas.records import Application
from shortlist_ai.services.document_store import DocumentStore, LocalDocumentStore
from shortlist_ai.services.repositories import ProfileRepository
from shortlist_ai.utils.logger import get_logger

logger = get_logger(__name__)


def extract_features(filename: str, store: Optional[DocumentStore] = None) -> ExtractedProfile:
    """
    Extract features from a stored CV.
    Raises DocumentNotFound / ExtractionFailed; feature extraction itself never raises.
    """
    store = store or LocalDocumentStore()
    text = read_document_text(store, filename)
    return extract(text)


def build_profile(application: Application, store: DocumentStore) -> ExtractedProfile:
    """
    Parse the application's CV without touching the cache.
    Missing, unreadable or corrupt documents give a Failed profile instead of raising.
    """
    if not application.cv_filename:
        logger.warning("No CV file for application %s", application.id)
        return ExtractedProfile.failed("No CV file uploaded", application_id=application.id)
    try:
        profile = extract_features(application.cv_filename, store)
    except (DocumentNotFound, ExtractionFailed, OSError) as e:
        logger.error("Error parsing CV for application %s: %s", application.id, e)
        return ExtractedProfile.failed(str(e), application_id=application.id)
    profile.application_id = application.id
    logger.info(
        "Parsed CV for application %s: %s skills, %s years exp, %s education",
        application.id,
        len(profile.skills),
        profile.years_of_experience,
        profile.education_level.value,
    )
    return profile


def parse_and_save_profile(
    application: Application,
    store: DocumentStore,
    profiles: ProfileRepository,
    force_refresh: bool = False,
) -> ExtractedProfile:
    """
    Return the cached profile for an application, parsing and saving it when absent.
    force_refresh re-parses and overwrites the cached profile in place.
    """
    existing = profiles.get_by_application(application.id)
    if existing is not None and not force_refresh:
        logger.info("CV already parsed for application %s", application.id)
        return existing
    return profiles.save(build_profile(application, store))
