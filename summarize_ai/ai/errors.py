"""
Error taxonomy for the summarization pipeline.

Every error carries a short machine-readable ``code`` that the HTTP layer
returns next to the message.
"""

from typing import Optional


class SummarizationError(Exception):
    """Base class for all summarization failures."""

    code = "summarization_error"


class SummaryValidationError(SummarizationError):
    """Input rejected before any provider call (empty or too short)."""

    code = "validation_error"


class ConfigurationError(SummarizationError):
    """Credential missing or provider misconfigured. Never retried."""

    code = "configuration_error"


class ProviderError(SummarizationError):
    """Transport or provider-side failure; the original exception is kept."""

    code = "provider_error"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class GenerationError(SummarizationError):
    """Provider answered but produced no usable text."""

    code = "generation_error"


class UnsupportedOptionError(SummarizationError):
    code = "unsupported_option"


class SummaryInProgressError(SummarizationError):
    code = "summary_in_progress"


class SummaryTimeoutError(SummarizationError):
    code = "summary_timeout"
