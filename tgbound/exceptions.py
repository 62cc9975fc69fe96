"""Exception hierarchy for the tgbound Telegram SDK."""

from typing import Any, Dict, List, Optional


class APIException(Exception):
    """Base exception for non-2xx responses from the Telegram Bot API.

    Also raised for 2xx responses whose body reports ``"ok": false``.

    Attributes:
        status_code: HTTP status code returned by the API.
        response_body: Raw response body as a dict, when available.
    """

    def __init__(self, status_code: int, response_body: Optional[Dict[str, Any]] = None) -> None:
        """Initialise with the HTTP status code and optional body."""
        self.status_code = status_code
        self.response_body = response_body or {}
        description = self.response_body.get("description", "Unknown error")
        super().__init__(f"API error {status_code}: {description}")


class MissingClientError(RuntimeError):
    """An entity was used as an action receiver but carries no client.

    This happens when a model is constructed by hand (for example in a test)
    instead of being returned by :meth:`tgbound.client.BotClient.submit`.
    """

    def __init__(self, entity: object) -> None:
        self.entity = entity
        super().__init__(
            f"{type(entity).__name__} is not bound to a client; "
            "only entities returned by a BotClient can issue requests"
        )


class MalformedEnvelopeError(ValueError):
    """An update envelope has more than one payload slot populated.

    Attributes:
        slots: Names of every populated slot.
    """

    def __init__(self, update_id: Optional[int], slots: List[str]) -> None:
        self.update_id = update_id
        self.slots = slots
        super().__init__(f"Update {update_id} carries more than one payload: {', '.join(slots)}")


class InvalidStateError(RuntimeError):
    """An action was invoked on an object in a state that cannot support it."""
