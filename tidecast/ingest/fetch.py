"""Fetch a JSON document over HTTP and decode it into a pydantic model."""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class FetchError(Exception):
    """Raised when a source cannot be fetched or its body does not decode."""

    pass


def fetch_model(
    url: str,
    model: type[ModelT],
    *,
    user_agent: str,
    timeout: float,
) -> ModelT:
    """GET ``url`` and validate the JSON body against ``model``.

    No retries: transport errors, non-2xx responses, bodies that are not
    JSON and bodies that fail validation all raise FetchError.
    """
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    try:
        resp = httpx.get(
            url, headers=headers, timeout=timeout, follow_redirects=True
        )
        resp.raise_for_status()
        return model.model_validate(resp.json())
    except httpx.HTTPStatusError as e:
        logger.error("GET %s returned %d", url, e.response.status_code)
        raise FetchError(f"{url} returned {e.response.status_code}") from e
    except httpx.RequestError as e:
        logger.error("GET %s failed: %s", url, e)
        raise FetchError(f"request to {url} failed: {e}") from e
    except ValueError as e:
        # json.JSONDecodeError and pydantic ValidationError are both ValueErrors
        kind = "validate" if isinstance(e, ValidationError) else "decode"
        logger.error("Could not %s %s response from %s: %s", kind, model.__name__, url, e)
        raise FetchError(f"could not {kind} response from {url}") from e
