"""Filtering and sorting of catalog entries for display."""

import unicodedata
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from decimal import Decimal
from email.utils import parsedate_to_datetime

from storefront.schemas.catalog import CatalogEntry, SortKey

PATH_SEPARATOR = " > "


def parse_timestamp(value: str | None) -> float:
    """Parse an ISO-8601 or RFC 2822 date into epoch seconds.

    Missing or unparsable values map to 0 (the epoch). Values without an
    offset are read as UTC.
    """
    if not value:
        return 0.0
    text = value.strip()
    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError):
            return 0.0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def collation_key(text: str) -> str:
    """Case- and accent-insensitive key for name ordering."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def rendered_path(entry: CatalogEntry) -> str:
    """Path as shown in listings, e.g. ``Electronics > Phones``."""
    return PATH_SEPARATOR.join(entry.path) if entry.path is not None else ""


def matches_path(entry: CatalogEntry, selected_path: Sequence[str]) -> bool:
    """True when the entry's path starts with ``selected_path``."""
    if not selected_path:
        return True
    if entry.path is None or len(entry.path) < len(selected_path):
        return False
    return all(entry.path[idx] == name for idx, name in enumerate(selected_path))


def matches_query(entry: CatalogEntry, query: str) -> bool:
    """Case-insensitive substring match on name, SKU and rendered path."""
    needle = query.casefold()
    haystacks = (entry.name or "", entry.sku or "", rendered_path(entry))
    return any(needle in field.casefold() for field in haystacks)


def sort_entries(entries: Iterable[CatalogEntry], sort_key: SortKey) -> list[CatalogEntry]:
    """Stable sort by ``sort_key``; ties keep input order."""
    data = list(entries)
    if sort_key == "name":
        return sorted(data, key=lambda e: collation_key(e.name or ""))
    if sort_key == "priceAsc":
        return sorted(data, key=lambda e: e.price if e.price is not None else Decimal(0))
    if sort_key == "priceDesc":
        return sorted(
            data,
            key=lambda e: e.price if e.price is not None else Decimal(0),
            reverse=True,
        )
    if sort_key == "recent":
        return sorted(data, key=lambda e: parse_timestamp(e.updated_at), reverse=True)
    raise ValueError(f"Unknown sort key: {sort_key}")


def select_entries(
    entries: Iterable[CatalogEntry],
    selected_path: Sequence[str] = (),
    query: str = "",
    category_filter: str = "",
    sort_key: SortKey = "recent",
) -> list[CatalogEntry]:
    """Produce the ordered list of entries to display.

    Applies, in order: path restriction, text search, top-level category
    filter, sort. The search only runs when the query is non-blank.

    Args:
        entries: Catalog snapshot
        selected_path: Current browse position
        query: Free-text search
        category_filter: Required first path segment, empty for all
        sort_key: name, priceAsc, priceDesc or recent

    Returns:
        New list; the input is not modified
    """
    data = [entry for entry in entries if matches_path(entry, selected_path)]

    if query.strip():
        data = [entry for entry in data if matches_query(entry, query)]

    if category_filter:
        data = [
            entry
            for entry in data
            if entry.path and entry.path[0] == category_filter
        ]

    return sort_entries(data, sort_key)


def top_level_categories(entries: Iterable[CatalogEntry]) -> list[str]:
    """Distinct first path segments, sorted (case-sensitive)."""
    return sorted({entry.path[0] for entry in entries if entry.path})
