"""Fetcher for the remote server list.

Supports the wrapper format served by the Minetest master server:
- `{"total": {...}, "list": [{...}, {...}]}`

Only `list` matters; any other top-level field is ignored. Anything that is
not an object with a `list` array of objects is a `DecodeError`.
"""

from __future__ import annotations

import json
import logging
import math

import httpx
from pydantic import ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import DecodeError, TransportError
from core.domain.models import ServerDirectory

logger = logging.getLogger(__name__)


def fetch_directory(
    address: str,
    *,
    settings: AppSettings | None = None,
    client: httpx.Client | None = None,
) -> ServerDirectory:
    """GET `address` and parse the body into a `ServerDirectory`.

    A caller-supplied `client` is used as-is and left open.
    """

    owns_client = client is None
    if client is None:
        client = build_client(settings)

    logger.debug("fetching server list from %s", address)
    try:
        response = client.get(address)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise TransportError(
            f"{address} answered HTTP {exc.response.status_code}"
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise TransportError(f"request to {address} failed: {exc}") from exc
    finally:
        if owns_client:
            client.close()

    directory = parse_directory(response.content)
    logger.debug("received %d records", len(directory))
    return directory


def parse_directory(content: bytes | str) -> ServerDirectory:
    try:
        data = json.loads(content, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as exc:
        raise DecodeError(f"server list is not valid JSON: {exc}") from exc
    try:
        return ServerDirectory.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(f"unexpected server list payload: {_first_error(exc)}") from exc


# NaN/Infinity/-Infinity are not JSON; the stdlib decoder accepts them by default.
def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not a JSON number")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    where = ".".join(str(part) for part in first.get("loc", ()))
    msg = first.get("msg", "invalid")
    return f"{where}: {msg}" if where else msg
