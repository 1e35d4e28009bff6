"""Unified error codes and custom exceptions.

Error code ranges:
  6xxx: Statement
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 6xxx: Statement ---

class UnknownPlayTypeError(AppError):
    def __init__(self, play_type: str) -> None:
        self.play_type = play_type
        super().__init__(6001, f"unknown type: {play_type}", 422)


class PlayNotFoundError(AppError):
    def __init__(self, play_id: str) -> None:
        self.play_id = play_id
        super().__init__(6002, f"Play not found in catalog: {play_id}", 422)


class InvalidAudienceError(AppError):
    def __init__(self, audience: int) -> None:
        super().__init__(6003, f"Audience must be non-negative, got {audience}", 422)


class InvalidPayloadError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(6004, f"Invalid payload: {detail}", 422)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
