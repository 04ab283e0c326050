"""
Custom exceptions for the email generation pipeline.

Validation errors carry a stable ``kind`` and a user-facing ``message``
so entry adapters can report them without inspecting the text.
Generation failures never carry provider detail.
"""


class PipelineExecutionError(Exception):
    """
    Base exception for pipeline execution failures.

    All step-specific exceptions inherit from this.
    """
    pass


class StepExecutionError(PipelineExecutionError):
    """
    Raised when a pipeline step fails.

    Attributes:
        step_name: Name of the failed step
        original_error: The underlying exception
    """

    def __init__(self, step_name: str, original_error: Exception):
        self.step_name = step_name
        self.original_error = original_error
        error_message = f"Step '{step_name}' failed: {str(original_error)}"
        super().__init__(error_message)


class ValidationError(PipelineExecutionError):
    """
    Raised when a request or step input fails validation.

    Detected before any external call and never retried.
    """

    kind = "invalid_input"
    message = "Invalid request"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFieldError(ValidationError):
    """Context or purpose was not supplied."""

    kind = "missing_field"
    message = "Missing required fields"


class ContextTooShortError(ValidationError):
    """Trimmed context is shorter than the minimum length."""

    kind = "context_too_short"
    message = "Please provide more context for your email (at least 10 characters)"


class ContextTooLongError(ValidationError):
    """Trimmed context is longer than the maximum length."""

    kind = "context_too_long"
    message = "Context is too long. Please keep it under 2000 characters."


class UnsupportedPurposeError(ValidationError):
    """Purpose is not one of the supported email purposes."""

    kind = "unsupported_purpose"
    message = "Unsupported email purpose"


class ExternalAPIError(PipelineExecutionError):
    """
    Raised when an external API call fails.
    """
    pass


class GenerationFailure(ExternalAPIError):
    """
    Raised when the text-generation endpoint cannot produce an email.

    Covers missing credentials, network, auth, quota and empty or
    malformed responses. The message is always generic; the cause is
    logged and chained, not exposed.
    """

    GENERIC_MESSAGE = "Failed to generate email"

    def __init__(self, message: str = GENERIC_MESSAGE):
        super().__init__(message)
