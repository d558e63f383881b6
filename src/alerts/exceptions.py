"""Alert-pipeline exceptions."""

from __future__ import annotations


class AlertError(Exception):
    """Base exception for alert pipeline errors."""


class MalformedRecordError(AlertError):
    """Raised when an inbound record cannot be turned into an alert."""


class ContractViolationError(AlertError):
    """Raised when a classifier is called outside its precondition."""
