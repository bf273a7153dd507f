"""
HTTP client utilities with connection pooling.
Provides reusable httpx clients for the completion API and the interaction log store.
"""
import httpx
from config import Config


class HTTPClientManager:
    """Manages the application's shared httpx clients."""

    def __init__(self, config: Config, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport
        self._completion_client: httpx.AsyncClient | None = None
        self._store_client: httpx.AsyncClient | None = None

    def _build_client(self, max_connections: int) -> httpx.AsyncClient:
        limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max(1, max_connections // 2),
            keepalive_expiry=30.0
        )
        if self._transport is not None:
            return httpx.AsyncClient(
                timeout=self.config.REQUEST_TIMEOUT,
                limits=limits,
                transport=self._transport
            )
        return httpx.AsyncClient(
            timeout=self.config.REQUEST_TIMEOUT,
            limits=limits,
            http2=True
        )

    def get_completion_client(self) -> httpx.AsyncClient:
        """
        Get or create the shared client for chat-completion calls.

        Returns:
            Configured httpx.AsyncClient for the completion API
        """
        if self._completion_client is None:
            self._completion_client = self._build_client(max_connections=20)
        return self._completion_client

    def get_store_client(self) -> httpx.AsyncClient:
        """
        Get or create the shared client for interaction log writes.

        Returns:
            Configured httpx.AsyncClient for the tabular store
        """
        if self._store_client is None:
            self._store_client = self._build_client(max_connections=10)
        return self._store_client

    async def close_all(self) -> None:
        """
        Close all managed clients and clean up connections.
        """
        try:
            if self._completion_client is not None:
                await self._completion_client.aclose()
                self._completion_client = None
        finally:
            if self._store_client is not None:
                await self._store_client.aclose()
                self._store_client = None
