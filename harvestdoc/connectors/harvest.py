"""
Harvest connector - JSON API client for a remote concept catalog.
"""
import logging
import ssl
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urlsplit, urlunsplit

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.ssl_ import create_urllib3_context

from harvestdoc import __version__
from harvestdoc.core.config import settings
from harvestdoc.core.errors import TransportError, UnexpectedStatusError
from harvestdoc.ports.sources import CatalogSource
from harvestdoc.schemas.concept import Concept, decode_concepts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TLSPolicy:
    """
    Cipher preferences for HTTPS connections.

    ECDHE suites come first for forward secrecy. The cipher string never
    lists suites weaker than those, so the handshake cannot silently
    downgrade to them.
    """

    ciphers: str = field(default_factory=lambda: settings.TLS_CIPHERS)
    minimum_version: ssl.TLSVersion = ssl.TLSVersion.TLSv1_2

    def ssl_context(self) -> ssl.SSLContext:
        context = create_urllib3_context(ciphers=self.ciphers)
        context.minimum_version = self.minimum_version
        context.load_default_certs()
        return context


class CipherSuiteAdapter(HTTPAdapter):
    """Transport adapter that applies a TLSPolicy to every pool it creates."""

    def __init__(self, tls_policy: TLSPolicy, **kwargs):
        # HTTPAdapter.__init__ builds the pool manager, so the policy goes first
        self.tls_policy = tls_policy
        super().__init__(**kwargs)

    def init_poolmanager(self, *args, **kwargs):
        kwargs["ssl_context"] = self.tls_policy.ssl_context()
        return super().init_poolmanager(*args, **kwargs)

    def proxy_manager_for(self, *args, **kwargs):
        kwargs["ssl_context"] = self.tls_policy.ssl_context()
        return super().proxy_manager_for(*args, **kwargs)


class HarvestConnector(CatalogSource):
    """Client for reading the concept catalog of a Harvest API."""

    def __init__(
        self,
        endpoint: str,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        tls_policy: Optional[TLSPolicy] = None,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.token = token or ""
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.tls_policy = tls_policy or TLSPolicy()
        # A caller-supplied session is used as configured
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = f"harvestdoc/{__version__}"
            session.mount("https://", CipherSuiteAdapter(self.tls_policy))
        self.session = session

    def describe(self) -> str:
        return self.endpoint

    def url_for(self, path: str) -> str:
        """Join a relative API path onto the endpoint, keeping its query string."""
        if path.startswith("/"):
            path = path[1:]

        parts = urlsplit(self.endpoint)
        return urlunsplit(parts._replace(path=f"{parts.path.rstrip('/')}/{path}"))

    def _send(self, path: str) -> requests.Response:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Api-Token"] = self.token

        url = self.endpoint
        try:
            url = self.url_for(path)
            logger.debug(f"GET {url}")
            return self.session.get(url, headers=headers, timeout=self.timeout)
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Request to {url} failed: {e}")
            raise TransportError(f"transport: {e}") from e

    def concepts(self) -> List[Concept]:
        """
        Fetch all concepts from <endpoint>/concepts/.

        Returns:
            Concepts in API order

        Raises:
            TransportError: If the API cannot be reached or times out
            UnexpectedStatusError: If the API answers with anything but 200
            DecodeError: If the body is not a JSON array of concepts
        """
        with self._send("concepts/") as response:
            if response.status_code != 200:
                logger.error(
                    f"Unexpected status from {response.url}: {response.status_code} {response.reason}"
                )
                raise UnexpectedStatusError(response.status_code, response.reason or "")

            concepts = decode_concepts(response.content)

        logger.info(f"Fetched {len(concepts)} concepts from {self.endpoint}")
        return concepts

    def close(self) -> None:
        self.session.close()
