"""Core: the event envelope, its collaborator interfaces, and event names."""

from eventhub.core.interfaces import ChannelId, HubEventData, HubPublisher
from eventhub.core.models.event import HubEvent

__all__ = [
    "ChannelId",
    "HubEvent",
    "HubEventData",
    "HubPublisher",
]
