"""Pydantic model for the event envelope."""

from eventhub.core.models.event import HubEvent, canonical_name

__all__ = [
    "HubEvent",
    "canonical_name",
]
