"""Share-token encoding for scenarios.

A token is the compact JSON of the scenario (camelCase keys) wrapped in
standard base64, the same format earlier versions of the page put in the
``?scenario=`` query parameter.
"""
import base64
import json
import logging
from typing import Any, Mapping, Optional
from urllib.parse import quote

from .config import SHARE_QUERY_KEY
from .schemas import ScenarioParameters

logger = logging.getLogger(__name__)


def encode(params: ScenarioParameters) -> str:
    raw = json.dumps(params.to_wire(), separators=(",", ":"))
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode(token: Any) -> Optional[ScenarioParameters]:
    """Inverse of `encode`. Returns None for anything that isn't a valid token."""
    if not isinstance(token, str) or not token:
        return None
    try:
        raw = base64.b64decode(token.encode("ascii"), validate=True).decode("utf-8")
        payload = json.loads(raw)
        if not isinstance(payload, dict):
            logger.debug("share token is not an object: %r", type(payload).__name__)
            return None
        return ScenarioParameters.from_wire(payload)
    except (ValueError, TypeError, OverflowError, RecursionError) as e:
        logger.debug("could not decode share token: %s", e)
        return None


def build_share_url(params: ScenarioParameters, base_url: str) -> str:
    token = quote(encode(params), safe="")
    return f"{base_url}?{SHARE_QUERY_KEY}={token}"


def token_from_query(query: Mapping[str, Any]) -> Optional[str]:
    """Share token from a mapping of query parameters, if present.

    Some clients turn an unescaped '+' into a space; base64 never contains
    spaces so they are mapped back.
    """
    token = query.get(SHARE_QUERY_KEY)
    if isinstance(token, (list, tuple)):
        token = token[0] if token else None
    if not token:
        return None
    return str(token).replace(" ", "+")
