"""CV pipeline: text extraction (PDF/DOCX/text), lexical feature extraction, profile cache."""

from shortlist_ai.cv_pipeline.cv_parser import build_profile, extract_features, parse_and_save_profile
from shortlist_ai.cv_pipeline.feature_extractor import extract
from shortlist_ai.cv_pipeline.text_extractor import extract_text, read_document_text

__all__ = [
    "build_profile",
    "extract",
    "extract_features",
    "extract_text",
    "parse_and_save_profile",
    "read_document_text",
]
