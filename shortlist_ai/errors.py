"""Exceptions raised by the shortlisting engine."""


class ShortlistError(Exception):
    """Base class for shortlisting engine errors."""


class DocumentNotFound(ShortlistError):
    """No stored document exists under the referenced filename."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"CV file not found: {filename}")
        self.filename = filename


class ExtractionFailed(ShortlistError):
    """The document exists but its text could not be extracted (corrupt or unsupported)."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Could not extract text from {filename}: {reason}")
        self.filename = filename


class JobNotFound(ShortlistError):
    """The job being shortlisted does not exist."""

    def __init__(self, job_id) -> None:
        super().__init__(f"Job not found: {job_id}")
        self.job_id = job_id
