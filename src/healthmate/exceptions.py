"""Exception hierarchy for healthmate."""


class HealthMateError(Exception):
    """Base exception for all healthmate errors."""


class EmptyInputError(HealthMateError, ValueError):
    """Raised when a required text input is empty or whitespace-only."""


class InvalidReportTypeError(HealthMateError, ValueError):
    """Raised when a report kind other than personal/professional is requested."""


class LLMClientError(HealthMateError):
    """Raised when LLM API calls fail after exhausting retries."""


class RetryableError(LLMClientError):
    """Rate limits, timeouts and 5xx responses; retried with backoff."""


class NonRetryableError(LLMClientError):
    """Auth errors and bad requests (4xx other than 429); never retried."""


class UpstreamServiceError(HealthMateError):
    """The HealthMate HTTP API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.status_code = status_code


class WorkflowError(HealthMateError):
    """Base class for report-analysis workflow errors."""


class InvalidTransitionError(WorkflowError):
    """A transition was requested from a state that does not allow it."""


class ConsentRequiredError(WorkflowError):
    """Analysis was requested before the data-processing notice was acknowledged."""


class OperationInProgressError(WorkflowError):
    """A second request was issued while the previous one is still pending."""


class AnalysisError(WorkflowError):
    """The analysis result cannot drive the question phase (no questions)."""


class ReportGenerationError(WorkflowError):
    """The generated report has no content."""


class SessionClosedError(HealthMateError):
    """A chatbot session was used after it was closed."""
