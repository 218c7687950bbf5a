"""
Error taxonomy shared by repositories, services and adapters.
Every error carries a human-readable message suitable for a notification.
"""

from typing import Optional


class AppError(Exception):
    """Base class for all application errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(AppError):
    """Required configuration (credentials, URLs) is missing"""


class AuthError(AppError):
    """No authenticated session for an operation that requires one"""


class FetchError(AppError):
    """A backend read failed"""


class WriteError(AppError):
    """A backend write failed"""


class NotFoundError(AppError):
    """A write matched zero rows"""


class ClubDeletionError(WriteError):
    """A stage of the stepwise cascade delete failed.

    The cascade is not transactional: stages before `stage` have already been
    applied when this is raised.
    """

    def __init__(self, stage: str, message: str):
        super().__init__(message)
        self.stage = stage


class StatisticsFetchError(AppError):
    """The statistics aggregation was aborted"""


class PlacesApiError(AppError):
    """Places provider unavailable: missing key, load failure or non-OK status"""

    def __init__(self, message: str, status: Optional[str] = None):
        super().__init__(message)
        self.status = status
