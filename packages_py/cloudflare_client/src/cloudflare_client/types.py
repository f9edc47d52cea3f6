"""
Core type definitions for cloudflare-client.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Literal, Optional, Tuple, TypedDict, Union

# HTTP Methods
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


@dataclass
class FetchResponse:
    """Standardized response object."""
    status: int
    status_text: str
    headers: Dict[str, str]
    url: str
    method: str = "GET"
    text: str = ""

    @property
    def is_success(self) -> bool:
        """Check if status code is 2xx."""
        return 200 <= self.status <= 299


class RequestOptions(TypedDict, total=False):
    """Options for making a request."""
    method: HttpMethod
    url: str  # Path relative to base_url, already percent-encoded
    headers: Dict[str, str]
    query: List[Tuple[str, str]]  # Ordered pairs, repeated keys allowed
    json: Any
    timeout: Union[float, None]


class RequestContext(TypedDict):
    """Context passed to auth callbacks."""
    method: str
    url: str
    headers: Dict[str, str]
    body: Any


TokenProvider = Callable[[RequestContext], Optional[str]]
