"""Error taxonomy shared by the codec, exporter, fetcher and web layer"""

from typing import Optional


class TranscriptViewerError(Exception):
    """Base class for all transcript viewer errors"""


class InvalidTimestamp(TranscriptViewerError, ValueError):
    """A time offset is negative, non-finite or malformed"""


class EmptyDocument(TranscriptViewerError, ValueError):
    """An export was requested without a loaded transcript"""


class MissingParameter(TranscriptViewerError, ValueError):
    """A required query parameter is absent"""

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.parameter = parameter


class UpstreamError(TranscriptViewerError):
    """The backend answered with a non-success status"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkError(TranscriptViewerError):
    """No response reached us from the backend"""

    def __init__(self, message: str = "Unable to reach the transcript service"):
        super().__init__(message)
        self.message = message
