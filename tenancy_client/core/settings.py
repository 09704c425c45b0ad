from dataclasses import dataclass, replace

from tenancy_client import config


@dataclass(frozen=True)
class Config:
    """Connection settings passed explicitly to every request."""

    host: str
    skip_verify_ssl: bool = False
    request_timeout: float = 30.0
    # 0 disables the bound on pages followed by a full traversal
    max_pages: int = 1000

    @classmethod
    def from_settings(cls, **overrides) -> "Config":
        """Snapshot the global settings, optionally overriding some fields."""
        settings = cls(
            host=config.HOST or "",
            skip_verify_ssl=bool(config.SKIP_VERIFY_SSL),
            request_timeout=float(config.REQUEST_TIMEOUT or 30.0),
            max_pages=int(config.MAX_PAGES or 0),
        )
        return replace(settings, **overrides) if overrides else settings

    def url(self, path: str) -> str:
        return f"{self.host.rstrip('/')}/{path.lstrip('/')}"
