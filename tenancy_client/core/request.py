from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode, urlsplit


@dataclass(frozen=True)
class RequestPlan:
    """What to fetch: a path and its ordered query parameters."""

    path: str
    query: tuple[tuple[str, str], ...] = ()

    @classmethod
    def build(cls, path: str, query=None) -> "RequestPlan":
        """Build a plan from a mapping or a sequence of (key, value) pairs."""
        if query is None:
            pairs = ()
        elif hasattr(query, "items"):
            pairs = tuple((str(k), str(v)) for k, v in query.items())
        else:
            pairs = tuple((str(k), str(v)) for k, v in query)
        return cls(path=path, query=pairs)

    @classmethod
    def from_url(cls, url: str) -> "RequestPlan":
        """
        Re-derive a plan from a cursor URL issued by the server.

        The URL may be absolute or relative, only its path and query are kept.
        The query is left untouched: order, repeated keys and blank values
        survive, whatever the cursor encoding is.
        """
        parts = urlsplit(url)
        if not parts.path:
            raise ValueError(f"cursor URL has no path: {url!r}")
        return cls(
            path=parts.path,
            query=tuple(parse_qsl(parts.query, keep_blank_values=True)),
        )

    @property
    def query_string(self) -> str:
        return urlencode(self.query)

    def url(self) -> str:
        return f"{self.path}?{self.query_string}" if self.query else self.path
