"""CV Shortlist AI: deterministic resume feature extraction and multi-factor applicant shortlisting."""

__version__ = "0.1.0"
