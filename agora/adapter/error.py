"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class AnalysisServiceError(ProviderError):
    """The analysis service failed or could not be reached."""

    pass


class ImageStorageError(AdapterError):
    """An image could not be written to storage."""

    pass
