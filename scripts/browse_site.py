#!/usr/bin/env python
"""Browse a tenant's public catalog through a running storefront service.

Usage:
    # Top-level categories and all products
    python scripts/browse_site.py --site acme

    # Drill into a category path, search and sort
    python scripts/browse_site.py --site acme \
        --path Electronics --path Phones \
        --query pro --sort priceAsc
"""

import argparse
import asyncio
import sys

import httpx


async def fetch_view(
    base_url: str,
    site_name: str,
    path: list[str],
    query: str,
    category: str,
    sort: str | None,
) -> dict | None:
    """Request the browse view for one site.

    Args:
        base_url: Storefront service base URL
        site_name: Public site slug
        path: Selected category path
        query: Search text
        category: Top-level category filter
        sort: Sort key, or None for the service default

    Returns:
        View JSON, or None on failure
    """
    params: list[tuple[str, str]] = [("path", name) for name in path]
    params += [("q", query), ("category", category)]
    if sort:
        params.append(("sort", sort))

    async with httpx.AsyncClient(base_url=base_url, timeout=30.0) as client:
        response = await client.get(f"/s/{site_name}/products", params=params)

    if response.status_code != 200:
        print(f"Error {response.status_code}: {response.text}")
        return None
    return response.json()


def print_view(view: dict) -> None:
    """Print categories and entries of a browse view."""
    state = view["state"]
    crumbs = " > ".join(state["selectedPath"]) or "Root"
    print(f"\n{'='*60}")
    print(f"Browse: {crumbs}   (sort: {state['sort']})")
    print(f"{'='*60}")

    if view["isLeafLevel"]:
        print("No further subcategories. Showing products below.")
    else:
        for node in view["categories"]:
            print(f"  [{node['name']}]  {len(node['children'])} subcategories")

    print(f"\n{len(view['entries'])} of {view['totalEntries']} products")
    for entry in view["entries"]:
        price = f"${float(entry['price']):.2f}" if entry.get("price") is not None else "-"
        category = " > ".join(entry["path"]) if entry.get("path") else "-"
        print(f"  {entry['name']:<30} {price:>10}  {category}")


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Browse a public storefront catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--site", required=True, help="Public site slug")
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        help="Category name; repeat to go deeper",
    )
    parser.add_argument("--query", default="", help="Search text")
    parser.add_argument("--category", default="", help="Top-level category filter")
    parser.add_argument(
        "--sort",
        choices=["name", "priceAsc", "priceDesc", "recent"],
        default=None,
        help="Sort order",
    )
    parser.add_argument(
        "--url",
        default="http://localhost:8080",
        help="Storefront service base URL (default: http://localhost:8080)",
    )
    return parser.parse_args()


async def main() -> int:
    args = parse_args()
    view = await fetch_view(
        base_url=args.url,
        site_name=args.site,
        path=args.path,
        query=args.query,
        category=args.category,
        sort=args.sort,
    )
    if view is None:
        return 1
    print_view(view)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
