GENERIC_ERROR_MESSAGE = "Failed to process menu image"


class MenuProcessingError(Exception):
    """Base error rendered to clients as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(MenuProcessingError):
    status_code = 400


class ExtractionError(MenuProcessingError):
    status_code = 400

    def __init__(self, message: str = "Could not extract menu items from image"):
        super().__init__(message)


class StorageError(MenuProcessingError):
    status_code = 400
