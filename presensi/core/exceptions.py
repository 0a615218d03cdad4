# presensi/core/exceptions.py


class FaceServiceError(Exception):
    """The vision service could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FaceServiceNotConfigured(FaceServiceError):
    pass
