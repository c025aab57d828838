"""Project-wide custom exception types."""


class SurveyReportError(RuntimeError):
    """Base class for errors raised by the survey report pipeline."""


class EmptyInputError(SurveyReportError):
    """Raised when the record source yields no survey responses."""

    def __init__(self, message: str = "Survey input is empty") -> None:  # noqa: D401 – simple constructor
        super().__init__(message)


class RecordSourceError(SurveyReportError):
    """Raised when the survey export cannot be located or read."""
