class AnalyzerError(Exception):
    """Base error for the analyze pipeline.

    ``message`` is safe to return to the HTTP caller.
    """

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(AnalyzerError):
    """Missing, wrong-typed, oversized or unreadable upload."""

    status_code = 400


class ExtractionFault(ClientInputError):
    """The PDF parser could not read the uploaded bytes."""


class RemoteServiceFault(AnalyzerError):
    """The model service call failed or returned unusable output."""

    status_code = 500
