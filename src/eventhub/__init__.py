"""eventhub: immutable event envelopes for a publish/subscribe hub."""

from eventhub.core.interfaces import ChannelId, HubEventData, HubPublisher
from eventhub.core.models.event import HubEvent
from eventhub.errors import InvalidArgumentError

__all__ = [
    "ChannelId",
    "HubEvent",
    "HubEventData",
    "HubPublisher",
    "InvalidArgumentError",
]
