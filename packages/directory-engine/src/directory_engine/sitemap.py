from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from xml.etree import ElementTree

from directory_engine.models import Facility, FacilityCategory
from directory_engine.seo import DEFAULT_BASE_URL, absolute_url
from directory_engine.slug_router import SlugRouter

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
LEGAL_PAGES: tuple[str, ...] = ("privacy-policy", "terms-of-service", "cookie-policy")


@dataclass(frozen=True)
class SitemapEntry:
    url: str
    last_modified: str
    change_frequency: str
    priority: float


def static_entries(base_url: str, now: str, categories: Sequence[FacilityCategory]) -> list[SitemapEntry]:
    entries = [SitemapEntry(absolute_url(base_url, "/"), now, "weekly", 1.0)]
    entries.extend(SitemapEntry(absolute_url(base_url, category.path), now, "weekly", 0.9) for category in categories)
    entries.extend(SitemapEntry(absolute_url(base_url, page), now, "monthly", 0.3) for page in LEGAL_PAGES)
    return entries


def build_sitemap(
    facilities: Mapping[FacilityCategory, Sequence[Facility]] | None,
    *,
    now: str,
    router: SlugRouter | None = None,
    base_url: str = DEFAULT_BASE_URL,
    categories: Sequence[FacilityCategory] = tuple(FacilityCategory),
) -> list[SitemapEntry]:
    """Sitemap entries: static pages, then region, city and facility pages.

    ``facilities`` is ``None`` when the store could not be read; only the
    static pages are listed then. Facilities whose county has no region are
    left out since their region page does not exist.
    """
    entries = static_entries(base_url, now, categories)
    if facilities is None:
        return entries

    router = router or SlugRouter()
    mapping = router.mapping
    region_pages: list[SitemapEntry] = []
    city_pages: list[SitemapEntry] = []
    facility_pages: list[SitemapEntry] = []
    for category in categories:
        mapped = [facility for facility in facilities.get(category, ()) if mapping.is_mapped(facility.county)]
        if not mapped:
            continue
        prefix = category.path
        paths = router.canonical_paths(mapped)
        seen_regions: set[str] = set()
        seen_cities: set[tuple[str, str]] = set()
        for facility in mapped:
            path = paths.get(facility.id)
            if path is None:
                continue
            if path.region_key not in seen_regions:
                seen_regions.add(path.region_key)
                region_pages.append(
                    SitemapEntry(absolute_url(base_url, f"{prefix}/{path.region_key}"), now, "weekly", 0.7)
                )
            city_key = (path.region_key, path.city_slug)
            if city_key not in seen_cities:
                seen_cities.add(city_key)
                city_url = absolute_url(base_url, f"{prefix}/{path.region_key}/{path.city_slug}")
                city_pages.append(SitemapEntry(city_url, now, "weekly", 0.7))
            facility_pages.append(
                SitemapEntry(absolute_url(base_url, path.url(prefix)), facility.updated_at or now, "monthly", 0.6)
            )
    return [*entries, *region_pages, *city_pages, *facility_pages]


def render_sitemap_xml(entries: Sequence[SitemapEntry]) -> str:
    urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NAMESPACE)
    for entry in entries:
        node = ElementTree.SubElement(urlset, "url")
        ElementTree.SubElement(node, "loc").text = entry.url
        ElementTree.SubElement(node, "lastmod").text = entry.last_modified
        ElementTree.SubElement(node, "changefreq").text = entry.change_frequency
        ElementTree.SubElement(node, "priority").text = f"{entry.priority:.1f}"
    body = ElementTree.tostring(urlset, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body
