"""
Read-only snapshot of the parts of a request that routing logic looks at.

Starlette only exposes the body asynchronously, while Ancestry and the
wildcard resolver are plain synchronous code, so the body is read once per
request and frozen here alongside the path and query string.
"""

import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from starlette.requests import Request

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class RequestSnapshot:
    """
    The method, path and input of a request.

    Attributes:
        method: HTTP verb, upper case.
        url_path: Path of the URL, ex: "/admin/articles/2/edit".
        inputs: Query string merged with the JSON or form body;
            body values win. Read-only once built.
    """

    method: str = "GET"
    url_path: str = "/"
    inputs: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", MappingProxyType(dict(self.inputs)))

    def has(self, key: str) -> bool:
        """Whether the input contains a non-empty value for a key."""
        value = self.inputs.get(key)
        return value is not None and value != ""

    def input(self, key: str, default: Any = None) -> Any:
        """Get an input value."""
        return self.inputs.get(key, default)

    def path(self) -> str:
        """The path without its leading slash, "/" for the root."""
        return self.url_path.strip("/") or "/"

    @classmethod
    async def from_request(cls, request: Request) -> "RequestSnapshot":
        """
        Build a snapshot from a Starlette request.

        Args:
            request: The incoming request.

        Returns:
            RequestSnapshot with query and body input merged.
        """
        inputs: Dict[str, Any] = dict(request.query_params)
        body = await _read_body(request)
        if body:
            inputs.update(body)
        return cls(
            method=request.method.upper(),
            url_path=request.url.path,
            inputs=inputs,
        )


async def _read_body(request: Request) -> Optional[Dict[str, Any]]:
    if request.method in ("GET", "HEAD"):
        return None

    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        raw = await request.body()
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.debug("Ignoring request body that isn't valid JSON")
            return None
        return data if isinstance(data, dict) else None

    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return dict(form)

    return None
