"""Collaborator interfaces (ABCs) for the hub.

The hub itself lives outside this package.  These contracts describe what
the envelope calls into (:class:`HubPublisher`) and what payload types may
implement to wrap themselves into an envelope (:class:`HubEventData`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from eventhub.core.models.event import HubEvent

T = TypeVar("T")

# Opaque destination token (an enum member, a string, ...).  Never interpreted here.
ChannelId = Hashable


class HubPublisher(ABC):
    """Publishing entry point of the hub."""

    @abstractmethod
    def publish(self, channel: ChannelId, event: HubEvent) -> None:
        """Deliver *event* to subscribers of *channel*."""


class HubEventData(ABC, Generic[T]):
    """Capability for payload types that know how to wrap themselves.

    Implementations build a :class:`HubEvent` using ``self`` as the data,
    so the payload type owns its event-name convention instead of every
    call site hardcoding it.
    """

    @abstractmethod
    def to_hub_event(self) -> HubEvent[T]:
        """Return a new event carrying ``self`` as its data."""
