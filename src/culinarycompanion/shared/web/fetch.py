from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import httpx

log = logging.getLogger("web.fetch")

async def post_json(
    url: str,
    payload: Dict[str, Any],
    *,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = 20,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[Any]:
    """
    POST a JSON body and return the decoded JSON response.
    Returns None on network errors, non-2xx statuses or undecodable bodies.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            r = await client.post(url, json=payload, headers=headers)
            r.raise_for_status()
            return r.json()
    except httpx.HTTPStatusError as e:
        log.warning("POST %s returned %s", url, e.response.status_code)
    except (httpx.HTTPError, ValueError) as e:
        log.warning("POST %s failed: %s", url, e)
    return None
