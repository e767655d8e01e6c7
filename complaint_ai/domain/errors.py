"""Error taxonomy for complaint prioritization."""


class ClassificationError(Exception):
    """The completion service could not produce a usable classification."""


class ClassificationQuotaError(ClassificationError):
    """Rate limit hit or quota exhausted (HTTP 429 / insufficient_quota)."""


class ClassificationTimeoutError(ClassificationError):
    """The completion request exceeded its time budget."""


class ClassificationUnavailableError(ClassificationError):
    """Network failure or non-success status from the completion service."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedAnalysisError(ClassificationError):
    """The completion text is not a valid priority analysis."""


class ComplaintNotFoundError(Exception):
    def __init__(self, complaint_id: str):
        super().__init__(f"Complaint not found: {complaint_id}")
        self.complaint_id = complaint_id
