# frontend/portal/errors.py


class ReviewError(Exception):
    """Base class for review portal errors."""


class NotFoundError(ReviewError):
    def __init__(self, submission_id):
        self.submission_id = submission_id
        super().__init__(f"Submission {submission_id} does not exist.")


class ValidationError(ReviewError):
    """A required field is missing or a value is not acceptable."""


class InvalidTransitionError(ValidationError):
    def __init__(self, submission_id, current, target):
        self.submission_id = submission_id
        self.current = current
        self.target = target
        super().__init__(f"Submission {submission_id} cannot move from '{current}' to '{target}'.")


class DispatchError(ReviewError):
    """The mail relay was unreachable or did not report success."""
