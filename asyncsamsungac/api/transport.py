"""
Transports for the Samsung air conditioner REST API.

A transport knows how to read the ``/devices`` list and how to send a
partial update to a device path. Two implementations are provided: a pooled
aiohttp client and a ``curl`` subprocess for hosts where the device's TLS
setup is easier to satisfy with curl.
"""

from __future__ import annotations

import asyncio
import json
import logging
import ssl
from typing import Any, Dict, List, Optional, Protocol, Tuple

import aiohttp

from asyncsamsungac.exceptions.api import ParseError
from asyncsamsungac.exceptions.auth import AuthenticationError
from asyncsamsungac.exceptions.network import (
    NetworkError,
    NetworkConnectionError,
    NetworkTimeoutError,
    ResponseError,
)

logger = logging.getLogger(__name__)

DEVICES_RESOURCE = "/devices"

HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403

# curl exit codes
CURL_OPERATION_TIMEDOUT = 28
CURL_SSL_ERRORS = frozenset({35, 53, 54, 58, 59, 60, 77, 80, 83, 90, 91})


class Transport(Protocol):
    """Minimal interface the cache and dispatcher rely on."""

    async def fetch_all(self) -> List[Dict[str, Any]]:
        """Return the ``Devices`` list reported by the air conditioner."""
        ...

    async def write(self, path: str, payload: Dict[str, Any]) -> None:
        """Send ``payload`` to ``path`` (a ``/devices/...`` resource)."""
        ...

    async def close(self) -> None:
        ...


def raise_for_status(status: int, resource: str) -> None:
    """Translate an HTTP status into the package error taxonomy."""
    if 200 <= status < 300:
        return
    if status in (HTTP_UNAUTHORIZED, HTTP_FORBIDDEN):
        raise AuthenticationError(f"Device rejected credentials for {resource} (HTTP {status})")
    raise ResponseError(status, f"API error for {resource}")


def decode_json(raw: bytes, resource: str) -> Any:
    """Decode a JSON body, returning ``None`` for an empty one."""
    try:
        decoded = raw.decode("utf-8").strip()
        return json.loads(decoded) if decoded else None
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ParseError(f"Failed to parse response from {resource}: {exc}") from exc


def extract_devices(data: Any) -> List[Dict[str, Any]]:
    """Return the ``Devices`` list of a ``GET /devices`` response."""
    if not isinstance(data, dict) or not isinstance(data.get("Devices"), list):
        raise ParseError("Response of /devices has no 'Devices' list")
    return data["Devices"]


class HttpTransport:
    """Transport backed by a persistent aiohttp session."""

    def __init__(
        self,
        host: str,
        token: str,
        cert_path: str,
        *,
        port: int = 8888,
        timeout: float = 5.0,
    ) -> None:
        """
        Initialize the HTTP transport.

        Args:
            host: IP address or hostname of the air conditioner
            token: Bearer token
            cert_path: Path to the PEM client certificate
            port: Port of the REST API
            timeout: Total timeout for a single request in seconds
        """
        self.host = host
        self.port = port
        self.token = token
        self.cert_path = cert_path
        self.timeout = timeout

        # Lazily-instantiated session
        self._session: aiohttp.ClientSession | None = None

    @property
    def base_url(self) -> str:
        return f"https://{self.host}:{self.port}"

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.token}",
        }

    def _create_ssl_context(self) -> ssl.SSLContext:
        """Client certificate context; the device presents a self-signed cert."""
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        try:
            context.load_cert_chain(certfile=self.cert_path)
        except (OSError, ssl.SSLError) as exc:
            raise AuthenticationError(f"Cannot load client certificate {self.cert_path}: {exc}") from exc
        return context

    async def _get_session(self) -> aiohttp.ClientSession:
        """Return an open aiohttp session, creating it on first use."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(ssl=self._create_ssl_context())
            self._session = aiohttp.ClientSession(
                base_url=self.base_url,
                headers=self._get_headers(),
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
        return self._session

    async def close(self) -> None:
        """Close the underlying aiohttp session (idempotent)."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _request(
        self,
        method: str,
        resource: str,
        *,
        body: Optional[Dict[str, Any]] = None,
    ) -> Tuple[int, bytes]:
        """Perform one request and return ``(status, raw_body)``."""
        session = await self._get_session()
        try:
            async with session.request(method, resource, json=body) as resp:
                raw = await resp.read()
                return resp.status, raw
        except asyncio.TimeoutError as exc:
            raise NetworkTimeoutError(f"{method} {resource} timed out after {self.timeout}s") from exc
        except aiohttp.ClientSSLError as exc:
            raise AuthenticationError(f"TLS handshake failed: {exc}") from exc
        except aiohttp.ClientConnectionError as exc:
            raise NetworkConnectionError(str(exc)) from exc
        except aiohttp.ClientError as exc:
            raise NetworkError(str(exc)) from exc

    async def fetch_all(self) -> List[Dict[str, Any]]:
        status, raw = await self._request("GET", DEVICES_RESOURCE)
        raise_for_status(status, DEVICES_RESOURCE)
        return extract_devices(decode_json(raw, DEVICES_RESOURCE))

    async def write(self, path: str, payload: Dict[str, Any]) -> None:
        status, _ = await self._request("PUT", path, body=payload)
        raise_for_status(status, path)


class CurlTransport:
    """Transport that shells out to ``curl`` for every request."""

    def __init__(
        self,
        host: str,
        token: str,
        cert_path: str,
        *,
        port: int = 8888,
        timeout: float = 5.0,
        curl: str = "curl",
    ) -> None:
        self.host = host
        self.port = port
        self.token = token
        self.cert_path = cert_path
        self.timeout = timeout
        self.curl = curl

    @property
    def base_url(self) -> str:
        return f"https://{self.host}:{self.port}"

    def _build_args(self, method: str, resource: str, body: Optional[Dict[str, Any]]) -> List[str]:
        args = [
            self.curl, "-s", "-S", "-k",
            "--cert", self.cert_path,
            "--max-time", str(self.timeout),
            "-H", "Content-Type: application/json",
            "-H", f"Authorization: Bearer {self.token}",
            "-X", method,
            "-w", "\n%{http_code}",
        ]
        if body is not None:
            args += ["-d", json.dumps(body, separators=(",", ":"))]
        args.append(f"{self.base_url}{resource}")
        return args

    async def _request(
        self,
        method: str,
        resource: str,
        *,
        body: Optional[Dict[str, Any]] = None,
    ) -> Tuple[int, bytes]:
        """Run curl and return ``(status, raw_body)``."""
        try:
            proc = await asyncio.create_subprocess_exec(
                *self._build_args(method, resource, body),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise NetworkError(f"Cannot run {self.curl}: {exc}") from exc

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout + 1)
        except asyncio.TimeoutError as exc:
            proc.kill()
            await proc.wait()
            raise NetworkTimeoutError(f"{method} {resource} timed out after {self.timeout}s") from exc

        if proc.returncode == CURL_OPERATION_TIMEDOUT:
            raise NetworkTimeoutError(f"{method} {resource} timed out after {self.timeout}s")
        if proc.returncode in CURL_SSL_ERRORS:
            raise AuthenticationError(f"TLS error from curl ({proc.returncode}): {stderr.decode(errors='replace').strip()}")
        if proc.returncode != 0:
            raise NetworkConnectionError(f"curl exited with {proc.returncode}: {stderr.decode(errors='replace').strip()}")

        raw, _, status_line = stdout.rpartition(b"\n")
        try:
            status = int(status_line.strip())
        except ValueError as exc:
            raise ParseError(f"Unexpected curl output for {resource}") from exc
        return status, raw

    async def fetch_all(self) -> List[Dict[str, Any]]:
        status, raw = await self._request("GET", DEVICES_RESOURCE)
        raise_for_status(status, DEVICES_RESOURCE)
        return extract_devices(decode_json(raw, DEVICES_RESOURCE))

    async def write(self, path: str, payload: Dict[str, Any]) -> None:
        status, _ = await self._request("PUT", path, body=payload)
        raise_for_status(status, path)

    async def close(self) -> None:
        """Nothing to release; every request is its own process."""
        return None
