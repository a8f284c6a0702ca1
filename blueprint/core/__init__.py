"""
Core Package - Breakaway Blueprint
blueprint/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from blueprint.core.exceptions import (
    BlueprintException,
    ConfigurationError,
    FlowFrozenError,
    FlowNotStartedError,
    InvalidStepError,
    LeadValidationError,
    NotificationDispatchError,
    StaleFlowError,
)

__all__ = [
    "BlueprintException",
    "ConfigurationError",
    "FlowFrozenError",
    "FlowNotStartedError",
    "InvalidStepError",
    "LeadValidationError",
    "NotificationDispatchError",
    "StaleFlowError",
]
