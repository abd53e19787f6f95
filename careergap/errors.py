"""Exceptions raised by the career analysis pipeline."""

from __future__ import annotations


class CareerGapError(Exception):
    """Base class for every error the engine surfaces to callers."""


class InsufficientInputError(CareerGapError):
    """Raised when no résumé text was supplied at all."""

    def __init__(self, message: str = "Resume text is empty; nothing to analyze."):
        self.message = message
        super().__init__(message)


class UnknownRoleError(CareerGapError):
    """
    Raised when a target role id is not present in the role catalog.

    Attributes:
        role_id: The identifier that failed to resolve
        known_roles: Role ids the catalog does define
    """

    def __init__(self, role_id: str, known_roles: list[str] | None = None):
        self.role_id = role_id
        self.known_roles = list(known_roles or [])
        message = f"Unknown target role: {role_id!r}"
        if self.known_roles:
            message += f" (known roles: {', '.join(self.known_roles)})"
        super().__init__(message)


class AnalysisFailure(CareerGapError):
    """
    Wraps an unexpected exception raised inside a pipeline stage.

    Attributes:
        message: Error description
        stage: Name of the stage that failed (e.g. 'assessment', 'gap_analysis')
        original_error: The exception that was wrapped
    """

    def __init__(
        self,
        message: str,
        stage: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.stage = stage
        self.original_error = original_error

        parts = [message]
        if stage:
            parts.append(f"Stage: {stage}")
        if original_error is not None:
            parts.append(f"Cause: {type(original_error).__name__}: {original_error}")
        super().__init__("\n".join(parts))
