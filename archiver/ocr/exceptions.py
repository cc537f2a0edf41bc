class OcrError(Exception):
    """Raised when OCR of the merged document fails."""


class OcrResponseError(OcrError):
    """Raised when the model response does not have the expected shape."""


class OcrNetworkError(OcrError):
    """Raised when the OCR provider call fails due to network/infrastructure issues."""
