"""Operator commands for the directory data.

    directory-admin analyze-counties [--category sauna]
    directory-admin verify
    directory-admin invalidate-cache [--category sauna]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections import Counter
from collections.abc import Sequence

from devkit.config import load_settings
from devkit.observability import configure_logging
from directory_engine.models import FacilityCategory
from directory_engine.slug_router import SlugRouter

from directory_api.cache import FacilityCache
from directory_api.dependencies import SERVICE_NAME, build_backends, build_cache_store
from directory_api.repositories.base import FacilityRepository

logger = logging.getLogger(__name__)

SAMPLE_URL_COUNT = 5
TOP_CITY_COUNT = 10


def _category(value: str) -> FacilityCategory:
    try:
        return FacilityCategory(value)
    except ValueError as exc:
        choices = ", ".join(item.value for item in FacilityCategory)
        raise argparse.ArgumentTypeError(f"unknown category '{value}', choose from: {choices}") from exc


async def analyze_counties(
    repository: FacilityRepository,
    category: FacilityCategory,
    router: SlugRouter | None = None,
) -> list[str]:
    router = router or SlugRouter()
    facilities = await repository.list_by_category(category)
    counts = Counter(facility.county for facility in facilities)
    lines = [f"{len(facilities)} {category.plural_label.lower()} across {len(counts)} raw county values"]
    for county, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
        key = router.mapping.region_key_for_county(county) if router.mapping.is_mapped(county) else "UNMAPPED"
        lines.append(f"  {county!r}: {count} -> {key}")
    unmapped = [county for county in counts if not router.mapping.is_mapped(county)]
    lines.append(f"{len(unmapped)} unmapped county values")

    paths = router.canonical_paths(facilities)
    lines.append("Sample URLs:")
    for facility in facilities[:SAMPLE_URL_COUNT]:
        path = paths.get(facility.id)
        lines.append(f"  {facility.name}: {path.url(category.path) if path else '(no path)'}")
    return lines


async def verify(repository: FacilityRepository, router: SlugRouter | None = None) -> tuple[list[str], int]:
    """Data checks per category. Returns report lines and the problem count."""
    router = router or SlugRouter()
    lines: list[str] = []
    problems = 0
    for category in FacilityCategory:
        facilities = await repository.list_by_category(category)
        lines.append(f"{category.value}: {len(facilities)} facilities")
        if not facilities:
            continue

        cities = Counter(facility.city for facility in facilities if facility.city)
        top = ", ".join(f"{city} ({count})" for city, count in cities.most_common(TOP_CITY_COUNT))
        lines.append(f"  top cities: {top}")

        slugs = router.slug_table(facilities)
        if len(set(slugs.values())) != len(slugs):
            problems += 1
            lines.append("  duplicate flat slugs found")

        paths = router.canonical_paths(facilities)
        for facility in facilities:
            path = paths.get(facility.id)
            resolved = router.resolve_slug(list(path.segments), facilities) if path else None
            if resolved is None or resolved.id != facility.id:
                problems += 1
                lines.append(f"  unresolvable: {facility.id} {facility.name!r} (county {facility.county!r})")
    lines.append(f"{problems} problem(s)")
    return lines, problems


async def invalidate_cache(cache: FacilityCache, category: FacilityCategory | None) -> int:
    if category is None:
        return await cache.invalidate_facilities()
    return await cache.invalidate_category(category)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="directory-admin", description=__doc__.splitlines()[0])
    commands = parser.add_subparsers(dest="command", required=True)
    analyze = commands.add_parser("analyze-counties", help="raw county distribution and region coverage")
    analyze.add_argument("--category", type=_category, default=FacilityCategory.SAUNA)
    commands.add_parser("verify", help="counts, top cities and slug resolution checks")
    invalidate = commands.add_parser("invalidate-cache", help="drop cached facility lists")
    invalidate.add_argument("--category", type=_category, default=None)
    return parser


async def _run(args: argparse.Namespace) -> int:
    settings = load_settings(f"{SERVICE_NAME}-admin")
    if args.command == "invalidate-cache":
        cache = FacilityCache(store=build_cache_store(settings), ttl_seconds=settings.FACILITY_CACHE_TTL_SECONDS)
        try:
            removed = await invalidate_cache(cache, args.category)
        finally:
            await cache.store.close()
        print(f"removed {removed} cache entr{'y' if removed == 1 else 'ies'}")
        return 0

    backends = build_backends(settings)
    logger.info("admin_backend_selected", extra={"component": "admin", "backend": backends.name})
    try:
        if args.command == "analyze-counties":
            lines = await analyze_counties(backends.facilities, args.category)
            exit_code = 0
        else:
            lines, problems = await verify(backends.facilities)
            exit_code = 1 if problems else 0
    finally:
        await backends.facilities.close()
        if backends.waitlist is not None:
            await backends.waitlist.close()
    print("\n".join(lines))
    return exit_code


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("WARNING")
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
