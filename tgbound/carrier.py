"""Client back-references carried by deserialized entities.

Every object graph returned by :meth:`tgbound.client.BotClient.submit` is
passed through :func:`propagate` once, so that each entity inside it knows
which client produced it.  Bound actions (``tgbound.actions``) then call
:func:`resolve` on their receiver instead of asking the caller for a client.

The reference lives on the instance, never in module or context state, so
entities from two clients running in the same process stay isolated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Set, TypeVar

from pydantic import BaseModel, PrivateAttr

from tgbound.exceptions import InvalidStateError, MissingClientError

if TYPE_CHECKING:
    from tgbound.client import BotClient

T = TypeVar("T")


class ClientCarrier(BaseModel):
    """Base class for models that can act as the receiver of a bound action.

    The back-reference is a pydantic private attribute: it is not a wire
    field and is never serialized.
    """

    _client: Any = PrivateAttr(default=None)

    @property
    def client(self) -> "BotClient":
        """The client that produced this entity.

        Raises:
            MissingClientError: If the entity was never attached.
        """
        return resolve(self)


def attach(entity: ClientCarrier, client: "BotClient") -> None:
    """Bind *entity* to *client*.

    Attaching the same client twice is a no-op.

    Raises:
        TypeError: If *entity* is not a :class:`ClientCarrier`.
        InvalidStateError: If *entity* is already bound to a different client.
    """
    if not isinstance(entity, ClientCarrier):
        raise TypeError(f"{type(entity).__name__} cannot carry a client")
    current = entity._client
    if current is None:
        entity._client = client
    elif current is not client:
        raise InvalidStateError(f"{type(entity).__name__} is already bound to another client")


def propagate(obj: T, client: "BotClient") -> T:
    """Attach *client* to *obj* and to every carrier reachable from it.

    Walks nested models and the elements of lists and tuples (nested lists
    included), skipping ``None``.  Plain models that cannot carry a client
    are still traversed, since they may embed carriers (``MessageEntity.user``).
    Scalars pass through untouched.  Returns *obj* for chaining.
    """
    _walk(obj, client, set())
    return obj


def _walk(obj: Any, client: "BotClient", seen: Set[int]) -> None:
    if isinstance(obj, (list, tuple)):
        for item in obj:
            _walk(item, client, seen)
        return
    if not isinstance(obj, BaseModel):
        return
    if id(obj) in seen:
        return
    seen.add(id(obj))

    if isinstance(obj, ClientCarrier):
        attach(obj, client)

    for name in type(obj).model_fields:
        value = getattr(obj, name)
        if value is not None:
            _walk(value, client, seen)


def resolve(entity: ClientCarrier) -> "BotClient":
    """Return the client *entity* is bound to.

    Raises:
        MissingClientError: If *entity* never went through :func:`attach`.
    """
    client = entity._client if isinstance(entity, ClientCarrier) else None
    if client is None:
        raise MissingClientError(entity)
    return client


def is_attached(entity: ClientCarrier) -> bool:
    """Return ``True`` when *entity* carries a client."""
    return isinstance(entity, ClientCarrier) and entity._client is not None
