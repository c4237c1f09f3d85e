"""Directory engine core package."""

from directory_engine.listings import (
    CityGroup,
    RegionSummary,
    average_rating,
    group_by_city,
    sort_by_rating,
    summarize_regions,
    top_rated,
)
from directory_engine.models import Facility, FacilityCategory
from directory_engine.regions import RegionDefinition, RegionMapping, RegionMappingError, default_region_mapping
from directory_engine.seo import PageMetadata, city_metadata, facility_metadata, index_metadata, region_metadata
from directory_engine.sitemap import SitemapEntry, build_sitemap, render_sitemap_xml
from directory_engine.slug_router import RESERVED_SEGMENTS, FacilityPath, SlugRouter, is_reserved_segment
from directory_engine.slugs import slugify

__all__ = [
    "Facility",
    "FacilityCategory",
    "RegionDefinition",
    "RegionMapping",
    "RegionMappingError",
    "default_region_mapping",
    "slugify",
    "RESERVED_SEGMENTS",
    "FacilityPath",
    "SlugRouter",
    "is_reserved_segment",
    "CityGroup",
    "RegionSummary",
    "group_by_city",
    "sort_by_rating",
    "top_rated",
    "average_rating",
    "summarize_regions",
    "PageMetadata",
    "index_metadata",
    "region_metadata",
    "city_metadata",
    "facility_metadata",
    "SitemapEntry",
    "build_sitemap",
    "render_sitemap_xml",
]
