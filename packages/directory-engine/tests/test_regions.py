import pytest

from directory_engine.models import Facility, FacilityCategory
from directory_engine.region_table import COUNTRIES, REGIONS
from directory_engine.regions import RegionMapping, RegionMappingError, default_region_mapping


def _facility(facility_id: str, county: str, city: str = "Town") -> Facility:
    return Facility(id=facility_id, name=f"Sauna {facility_id}", category=FacilityCategory.SAUNA, city=city, county=county)


def test_region_key_for_mapped_county() -> None:
    mapping = default_region_mapping()
    assert mapping.region_key_for_county("Leeds") == "west-yorkshire"
    assert mapping.region_key_for_county("Belfast, Antrim") == "belfast"
    assert mapping.region_key_for_county("ELY") == "cambridgeshire"


def test_region_key_lookup_is_case_sensitive_and_falls_back_to_slug() -> None:
    mapping = default_region_mapping()
    assert mapping.region_key_for_county("leeds") == "leeds"
    assert mapping.region_key_for_county("Isle of Wight") == "isle-of-wight"
    assert mapping.region_key_for_county("???") is None


def test_counties_for_region_key() -> None:
    mapping = default_region_mapping()
    assert mapping.counties_for_region_key("bristol") == ("Bristol",)
    assert "Keswick" in (mapping.counties_for_region_key("cumbria") or ())
    assert mapping.counties_for_region_key("atlantis") is None


def test_list_facilities_in_region_filters_by_membership() -> None:
    mapping = default_region_mapping()
    facilities = [_facility("1", "Leeds"), _facility("2", "Bradford"), _facility("3", "York")]

    members = mapping.list_facilities_in_region(facilities, "west-yorkshire")

    assert [facility.id for facility in members] == ["1", "2"]
    assert mapping.list_facilities_in_region(facilities, "atlantis") == []


def test_shipped_table_has_unique_raw_counties() -> None:
    mapping = default_region_mapping()
    raw = [county for _key, _name, _country, counties in REGIONS for county in counties]

    assert len(raw) == len(set(raw))
    assert len(mapping) == len(REGIONS) == 81
    assert mapping.region_key_for_county("Taunton") == "somerset"
    assert mapping.region_key_for_county("Kidderminster") == "worcestershire"
    assert mapping.region_key_for_county("Bangor") == "gwynedd"


def test_every_region_has_known_country() -> None:
    for region in default_region_mapping().regions():
        assert region.country in COUNTRIES
        assert region.name


def test_duplicate_raw_county_fails_at_construction() -> None:
    entries = [
        ("devon", "Devon", "England", ("Taunton",)),
        ("somerset", "Somerset", "England", ("Taunton",)),
    ]
    with pytest.raises(RegionMappingError, match="Taunton"):
        RegionMapping(entries)


def test_duplicate_or_malformed_key_fails_at_construction() -> None:
    with pytest.raises(RegionMappingError):
        RegionMapping([("kent", "Kent", "England", ("Deal",)), ("kent", "Kent", "England", ("Dover",))])
    with pytest.raises(RegionMappingError):
        RegionMapping([("West Kent", "Kent", "England", ("Deal",))])


def test_region_mapping_error_is_value_error() -> None:
    assert issubclass(RegionMappingError, ValueError)


def test_is_mapped_and_region_lookup() -> None:
    mapping = default_region_mapping()
    region = mapping.region("tyne-and-wear")

    assert mapping.is_mapped("Gateshead")
    assert not mapping.is_mapped("Gotham")
    assert region is not None
    assert region.name == "Tyne and Wear"
    assert "tyne-and-wear" in mapping
