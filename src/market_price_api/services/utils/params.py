"""Query parameter parsing shared by routes."""
from collections.abc import Callable


def parse_symbols_param(
    raw: str | None,
    normalizer: Callable[[str], str] | None = None,
) -> list[str]:
    """Parse a comma-separated symbols param into a list, optionally normalizing each."""
    parts = [s.strip() for s in (raw or "").split(",") if s.strip()]
    if normalizer is None:
        return parts
    return [normalizer(s) for s in parts]
