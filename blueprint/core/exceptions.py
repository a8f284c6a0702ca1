"""
Custom Exceptions - Breakaway Blueprint
blueprint/core/exceptions.py

Exception classes for configuration, flow navigation, lead capture and
notification dispatch.
"""

from typing import Dict, Optional


class BlueprintException(Exception):
    """Base exception for the assessment."""

    pass


class ConfigurationError(BlueprintException):
    """Malformed question or section definitions. Deployment defect, never user-recoverable."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FlowNotStartedError(BlueprintException):
    """A later step was entered without the session keys an earlier step writes."""

    def __init__(self, missing_key: str, redirect_to: str = "/assessment"):
        self.missing_key = missing_key
        self.redirect_to = redirect_to
        super().__init__(f"Session key '{missing_key}' not set; restart at {redirect_to}")


class StaleFlowError(BlueprintException):
    """Flow token was invalidated by a restart, or never issued."""

    def __init__(self, flow_token: str):
        self.flow_token = flow_token
        super().__init__(f"Flow token {flow_token} is not active")


class FlowFrozenError(BlueprintException):
    """Answers were committed; edits need a restart."""

    def __init__(self, message: str = "Assessment already completed"):
        self.message = message
        super().__init__(message)


class InvalidStepError(BlueprintException):
    """Action does not fit the current question or step."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class LeadValidationError(BlueprintException):
    """Lead contact fields failed validation."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))


class NotificationDispatchError(BlueprintException):
    """Outbound lead notification failed. Always caught inside the dispatcher."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
