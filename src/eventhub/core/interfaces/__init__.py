"""Hub collaborator interfaces."""

from eventhub.core.interfaces.hub import ChannelId, HubEventData, HubPublisher

__all__ = [
    "ChannelId",
    "HubEventData",
    "HubPublisher",
]
