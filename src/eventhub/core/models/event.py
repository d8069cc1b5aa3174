"""Pydantic model for the event envelope carried on the hub.

An event is the top-level envelope passed around on the hub: producers
publish events onto a channel, subscribers receive them.  Every envelope
carries a name (tag / category), an optional payload, and a random UUID
assigned when it is created.

Construction goes through four named factories::

    HubEvent.create("signIn")
    HubEvent.create_with_data("signIn", credentials)
    HubEvent.from_enum(AuthState.SIGNED_IN)
    HubEvent.from_enum_with_data(AuthState.SIGNED_IN, credentials)
"""

from __future__ import annotations

import logging
import types
import uuid
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union, get_args, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SkipValidation,
    field_validator,
    model_validator,
)

from eventhub.errors import InvalidArgumentError
from eventhub.log_config.logger import ContextualLogger

if TYPE_CHECKING:
    from eventhub.core.interfaces.hub import ChannelId, HubPublisher

_log = logging.getLogger(__name__)

T = TypeVar("T")


class HubEvent(BaseModel, Generic[T]):
    """Immutable envelope: ``name`` + optional ``data`` + unique ``id``.

    Two envelopes are equal only when name, data *and* id all match, so
    independently created events are never equal even with identical
    name and payload.
    """

    model_config = ConfigDict(frozen=True, strict=True, arbitrary_types_allowed=True)

    name: str = Field(description="Event tag, e.g. 'signIn' or 'Storage.downloadFile'")
    # Stored as given (no coercion, no copy); see _check_payload_type.
    data: SkipValidation[T | None] = Field(
        default=None, description="Optional payload; None means absent"
    )
    id: uuid.UUID = Field(default_factory=uuid.uuid4, description="Random (v4) event id")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("event name must be non-empty")
        return value

    @model_validator(mode="after")
    def _check_payload_type(self) -> HubEvent[T]:
        """Reject payloads that are not instances of the class parameter.

        ``HubEvent[int]`` only accepts ints; ``HubEvent[list[int]]`` checks
        ``list`` only.  Unparametrized events accept anything.
        """
        expected = _runtime_types(type(self).__pydantic_generic_metadata__["args"])
        if self.data is not None and expected is not None and not isinstance(self.data, expected):
            names = " | ".join(t.__name__ for t in expected)
            raise ValueError(f"data must be {names}, got {type(self.data).__name__}")
        return self

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, name: str) -> HubEvent[Any]:
        """Create an event with a name and no data."""
        return cls(name=_require_name(name))

    @classmethod
    def create_with_data(cls, name: str, data: T) -> HubEvent[T]:
        """Create an event with a name and a payload (which must not be ``None``)."""
        return cls(name=_require_name(name), data=_require_data(data))

    @classmethod
    def from_enum(cls, enumerated: Enum) -> HubEvent[Any]:
        """Create an event named after *enumerated*, with no data.

        See :func:`canonical_name` for how the member becomes a name.
        """
        return cls(name=canonical_name(enumerated))

    @classmethod
    def from_enum_with_data(cls, enumerated: Enum, data: T) -> HubEvent[T]:
        """Create an event named after *enumerated*, carrying *data*."""
        return cls(name=canonical_name(enumerated), data=_require_data(data))

    # ------------------------------------------------------------------
    # Publish
    # ------------------------------------------------------------------

    def publish(self, channel: ChannelId, hub: HubPublisher) -> None:
        """Hand this event to *hub* for delivery on *channel*.

        Pure delegation: routing, ordering and fan-out belong to the hub,
        and anything the hub raises propagates to the caller.
        """
        log = ContextualLogger(_log, event=self.name, id=self.id)
        log.debug("Publishing to channel %r", channel)
        hub.publish(channel, self)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HubEvent):
            return NotImplemented
        return self.name == other.name and self.data == other.data and self.id == other.id

    def __hash__(self) -> int:
        # Payload excluded: frozenset({1}) == {1}, but only one of them hashes.
        return hash((self.name, self.id))

    def __str__(self) -> str:
        return f"HubEvent(name={self.name!r}, data={self.data!r}, id={self.id})"


# ---------------------------------------------------------------------------
# Argument validation
# ---------------------------------------------------------------------------

def canonical_name(enumerated: Enum) -> str:
    """Return the event name for an enum member.

    String-valued members (``class AuthState(str, Enum)``) use their value;
    any other member uses its ``name``.
    """
    if enumerated is None:
        raise InvalidArgumentError("enumerated value is required")
    if not isinstance(enumerated, Enum):
        raise InvalidArgumentError(
            f"expected an Enum member, got {type(enumerated).__name__}"
        )
    value = enumerated.value
    if isinstance(value, str) and value.strip():
        return value
    return enumerated.name


def _require_name(name: str) -> str:
    if name is None:
        raise InvalidArgumentError("event name is required")
    if not isinstance(name, str):
        raise InvalidArgumentError(f"event name must be a str, got {type(name).__name__}")
    if not name.strip():
        raise InvalidArgumentError("event name must be non-empty")
    return name


def _require_data(data: T) -> T:
    if data is None:
        raise InvalidArgumentError("data is required; use the data-less factory for events without a payload")
    return data


def _runtime_types(args: tuple[Any, ...]) -> tuple[type, ...] | None:
    """Map a generic parameter to the classes ``isinstance`` can check.

    Returns ``None`` when there is nothing to check (no parameter, ``Any``,
    ``Literal[...]`` and other special forms).
    """
    if not args:
        return None
    tp = args[0]
    if tp is Any or isinstance(tp, TypeVar):
        return None
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        members = [_runtime_types((arg,)) for arg in get_args(tp)]
        if any(m is None for m in members):
            return None
        return tuple(t for m in members for t in m)
    runtime = origin or tp
    return (runtime,) if isinstance(runtime, type) else None
