# ABOUTME: Exception taxonomy for a single forecast pipeline run.
# ABOUTME: Every failure a run can end in is a PipelineError subclass carrying a readable message.


class PipelineError(Exception):
    """Base class for terminal failures of one pipeline run."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(PipelineError):
    """The endpoint could not be reached (connection refused, DNS, timeout)."""


class HttpError(PipelineError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP 錯誤! 狀態碼: {status_code}")
        self.status_code = status_code


class MalformedPayloadError(PipelineError):
    """The body is not JSON, or does not have the forecast payload structure."""


class ValidationError(PipelineError):
    """The payload parsed but cannot be displayed (failed flag, too few slots)."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
