"""BotClient -- transport and deserialization boundary of tgbound.

HTTP calls use the ``requests`` library.  :meth:`BotClient.submit` offloads
the blocking call via :func:`asyncio.to_thread`, validates the ``result``
member with the request's result type and binds every entity in the
returned graph to this client (see :mod:`tgbound.carrier`).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import requests

from tgbound.carrier import propagate
from tgbound.defaults import ClientDefaults
from tgbound.exceptions import APIException
from tgbound.methods import BotRequest, GetMe, GetUpdates
from tgbound.models import Update, User

_logger = logging.getLogger("tgbound.client")

DEFAULT_API_URL = "https://api.telegram.org"


class BotClient:
    """Client for the Telegram Bot API.

    Raises :class:`APIException` for non-2xx status codes and for bodies
    reporting ``"ok": false``.  Transport failures propagate as
    :class:`requests.RequestException`.

    Several clients may live in one process; entities remember which one
    produced them.
    """

    _DEFAULT_TIMEOUT: int = 10

    def __init__(
        self,
        base_url: str,
        timeout: int = _DEFAULT_TIMEOUT,
        bot_token: str | None = None,
        defaults: ClientDefaults | None = None,
    ) -> None:
        """Create a new client bound to *base_url*.

        Args:
            base_url: Full Bot API base URL (e.g. ``https://api.telegram.org/bot<token>``).
            timeout: Default request timeout in seconds.
            bot_token: Raw bot token, used for file-download URLs.
            defaults: Values bound actions fall back to when a parameter is
                not given explicitly.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._bot_token = bot_token
        self._defaults = defaults or ClientDefaults()

    @classmethod
    def from_token(cls, bot_token: str, api_url: str = DEFAULT_API_URL, **kwargs: Any) -> "BotClient":
        """Build a client for *bot_token* against *api_url*."""
        return cls(f"{api_url.rstrip('/')}/bot{bot_token}", bot_token=bot_token, **kwargs)

    @classmethod
    def from_env(cls) -> "BotClient":
        """Build a client from the values loaded by :mod:`config`.

        ``config`` is the application's settings module at the checkout
        root; it is not part of the installed distribution.
        """
        from config import BASE_URL, BOT_TOKEN, CLIENT_DEFAULTS, REQUEST_TIMEOUT  # deferred to avoid circular imports

        return cls(BASE_URL, timeout=REQUEST_TIMEOUT, bot_token=BOT_TOKEN, defaults=CLIENT_DEFAULTS)

    @property
    def defaults(self) -> ClientDefaults:
        return self._defaults

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------

    def _post(self, endpoint: str, payload: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None) -> Dict[str, Any]:
        """Send a POST request and return the parsed JSON body.

        Raises:
            APIException: If the response status code is not 2xx or the
                body says ``"ok": false``.
            requests.RequestException: On transport-level failures.
        """
        url = f"{self._base_url}/{endpoint.lstrip('/')}"
        response = requests.post(url, json=payload, timeout=timeout or self._timeout)
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not response.ok or body.get("ok") is False:
            raise APIException(response.status_code, body)
        return body

    def _http_timeout(self, request: BotRequest) -> float:
        # Long polling holds the connection open for the poll timeout itself.
        if isinstance(request, GetUpdates) and request.timeout:
            return self._timeout + request.timeout
        return self._timeout

    def _materialize(self, request: BotRequest, body: Dict[str, Any]) -> Any:
        if "result" not in body:
            raise APIException(200, {"description": f"{request.method_name} response carries no result"})
        return propagate(request.parse_result(body["result"]), self)

    # ------------------------------------------------------------------
    #  Public API
    # ------------------------------------------------------------------

    def call(self, request: BotRequest) -> Any:
        """Blocking variant of :meth:`submit`."""
        body = self._post(request.method_name, request.to_payload(), self._http_timeout(request))
        return self._materialize(request, body)

    async def submit(self, request: BotRequest) -> Any:
        """Execute *request* and return its result bound to this client.

        Cancelling the awaiting task abandons the wait; the worker thread
        finishes its HTTP call in the background.
        """
        _logger.debug("Submitting request", extra={"api_endpoint": request.method_name})
        body = await asyncio.to_thread(
            self._post, request.method_name, request.to_payload(), self._http_timeout(request)
        )
        return self._materialize(request, body)

    async def get_updates(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        timeout: Optional[int] = None,
        allowed_updates: Optional[List[str]] = None,
    ) -> List[Update]:
        """Long-poll for incoming updates."""
        return await self.submit(
            GetUpdates(offset=offset, limit=limit, timeout=timeout, allowed_updates=allowed_updates)
        )

    async def get_me(self) -> User:
        """Return the bot's own :class:`~tgbound.models.User`."""
        return await self.submit(GetMe())
