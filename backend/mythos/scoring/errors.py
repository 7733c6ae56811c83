"""Errors raised by the scoring and verification engine."""


class JourneyError(Exception):
    """Base class for journey engine errors."""


class UnknownCategory(JourneyError):
    """Raised when a media category has no rule in the point table."""

    def __init__(self, category):
        self.category = category
        super().__init__(f"Unknown media type: {getattr(category, 'value', category)}")


class AlreadyVerified(JourneyError):
    """Raised when verifying a submission that is already verified."""

    def __init__(self, submission_id):
        self.submission_id = submission_id
        super().__init__("Submission is already verified")


class InvalidSubmissionReference(JourneyError):
    """Raised when a submission id does not refer to a stored submission."""

    def __init__(self, submission_id):
        self.submission_id = submission_id
        super().__init__(f"Invalid submission reference: {submission_id}")


class NoTiersConfigured(JourneyError):
    """Raised when the title table is empty."""

    def __init__(self):
        super().__init__("No titles are configured in the journey settings")
