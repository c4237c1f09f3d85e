import pytest

from directory_api.admin_cli import analyze_counties, build_parser, invalidate_cache, verify
from directory_api.cache import FacilityCache, InMemoryCacheStore
from directory_api.repositories.memory import SAMPLE_FACILITIES, InMemoryFacilityRepository
from directory_engine.models import FacilityCategory


@pytest.mark.asyncio
async def test_analyze_counties_flags_unmapped_values() -> None:
    lines = await analyze_counties(InMemoryFacilityRepository(), FacilityCategory.SAUNA)

    assert "  'Leeds': 2 -> west-yorkshire" in lines
    assert "  'Isle of Wight': 1 -> UNMAPPED" in lines
    assert "1 unmapped county values" in lines
    assert "  Kelda Wood-Fired Sauna: /saunas/west-yorkshire/leeds/kelda-woodfired-sauna" in lines


@pytest.mark.asyncio
async def test_verify_reports_unresolvable_facilities() -> None:
    lines, problems = await verify(InMemoryFacilityRepository())

    assert problems == 1
    assert any("fac-011" in line for line in lines)
    assert "sauna: 11 facilities" in lines
    assert "ice_bath: 0 facilities" in lines


@pytest.mark.asyncio
async def test_verify_passes_on_mapped_data() -> None:
    mapped = [facility for facility in SAMPLE_FACILITIES if facility.county != "Isle of Wight"]

    lines, problems = await verify(InMemoryFacilityRepository(mapped))

    assert problems == 0
    assert lines[-1] == "0 problem(s)"


@pytest.mark.asyncio
async def test_invalidate_cache_by_category_and_all() -> None:
    cache = FacilityCache(store=InMemoryCacheStore(), ttl_seconds=300)
    await cache.set_rows(FacilityCategory.SAUNA, [])
    await cache.set_rows(FacilityCategory.COLD_PLUNGE, [])

    assert await invalidate_cache(cache, FacilityCategory.SAUNA) == 1
    assert await invalidate_cache(cache, None) == 1
    assert await cache.get_rows(FacilityCategory.COLD_PLUNGE) is None


def test_parser_reads_category_and_rejects_unknown() -> None:
    parser = build_parser()

    args = parser.parse_args(["analyze-counties", "--category", "cold_plunge"])

    assert args.command == "analyze-counties"
    assert args.category is FacilityCategory.COLD_PLUNGE
    assert parser.parse_args(["invalidate-cache"]).category is None
    with pytest.raises(SystemExit):
        parser.parse_args(["analyze-counties", "--category", "jacuzzi"])
