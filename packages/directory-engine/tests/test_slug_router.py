import pytest

from directory_engine.models import Facility, FacilityCategory
from directory_engine.slug_router import FacilityPath, SlugRouter, is_reserved_segment


def _facility(facility_id: str, name: str, city: str, county: str) -> Facility:
    return Facility(id=facility_id, name=name, category=FacilityCategory.SAUNA, city=city, county=county)


def test_slug_for_unique_name_is_plain_slug() -> None:
    router = SlugRouter()
    sauna = _facility("a", "The Sauna Hut", "Leeds", "Leeds")

    assert router.slug_for(sauna, [sauna]) == "the-sauna-hut"


def test_slug_for_shared_name_appends_city() -> None:
    router = SlugRouter()
    leeds = _facility("a", "Hot Box", "Leeds", "Leeds")
    york = _facility("b", "Hot Box", "York", "York")
    other = _facility("c", "Sweat Lodge", "York", "York")
    siblings = [leeds, york, other]

    assert router.slug_for(leeds, siblings) == "hot-box-leeds"
    assert router.slug_for(york, siblings) == "hot-box-york"
    assert router.slug_for(other, siblings) == "sweat-lodge"


def test_slug_table_breaks_name_and_city_ties_by_lowest_id() -> None:
    router = SlugRouter()
    siblings = [
        _facility("c", "Hot Box", "Leeds", "Leeds"),
        _facility("a", "Hot Box", "Leeds", "Leeds"),
        _facility("b", "Hot Box", "Leeds", "Leeds"),
    ]

    table = router.slug_table(siblings)

    assert table == {"a": "hot-box-leeds", "b": "hot-box-leeds-2", "c": "hot-box-leeds-3"}
    assert len(set(table.values())) == len(siblings)


def test_slug_table_is_independent_of_input_order() -> None:
    router = SlugRouter()
    siblings = [
        _facility("2", "Hot Box", "Leeds", "Leeds"),
        _facility("1", "Hot Box", "Leeds", "Leeds"),
        _facility("3", "Hot Box", "York", "York"),
    ]

    assert router.slug_table(siblings) == router.slug_table(list(reversed(siblings)))


def test_slug_table_suffix_skips_existing_slug() -> None:
    router = SlugRouter()
    siblings = [
        _facility("a", "Spa", "", "Leeds"),
        _facility("b", "Spa", "", "Leeds"),
        _facility("c", "Spa 2", "Leeds", "Leeds"),
    ]

    table = router.slug_table(siblings)

    assert table["a"] == "spa"
    assert table["c"] == "spa-2"
    assert table["b"] == "spa-3"


def test_resolve_single_segment() -> None:
    router = SlugRouter()
    leeds = _facility("a", "Hot Box", "Leeds", "Leeds")
    york = _facility("b", "Hot Box", "York", "York")

    assert router.resolve_slug(["hot-box-york"], [leeds, york]) is york
    assert router.resolve_slug(["hot-box"], [leeds, york]) is None


def test_reserved_segments_never_resolve() -> None:
    router = SlugRouter()
    named_admin = _facility("a", "Admin", "Leeds", "Leeds")

    assert router.resolve_slug(["admin"], [named_admin]) is None
    assert router.resolve_slug(["API"], [named_admin]) is None
    assert is_reserved_segment("Delete")
    assert not is_reserved_segment("sauna")


def test_resolve_three_segments() -> None:
    router = SlugRouter()
    target = _facility("a", "Kelda Sauna", "Leeds", "Leeds")
    elsewhere = _facility("b", "Kelda Sauna", "York", "York")

    found = router.resolve_slug(["west-yorkshire", "leeds", "kelda-sauna"], [target, elsewhere])

    assert found is target
    assert router.resolve_slug(["north-yorkshire", "leeds", "kelda-sauna"], [target, elsewhere]) is None
    assert router.resolve_slug(["atlantis", "leeds", "kelda-sauna"], [target]) is None


def test_resolve_three_segments_same_name_in_city() -> None:
    router = SlugRouter()
    first = _facility("a", "Float", "Bristol", "Bristol")
    second = _facility("b", "Float", "Bristol", "Bristol")

    assert router.resolve_slug(["bristol", "bristol", "float"], [second, first]) is first
    assert router.resolve_slug(["bristol", "bristol", "float-2"], [second, first]) is second


def test_resolve_other_segment_counts_raise() -> None:
    router = SlugRouter()
    with pytest.raises(ValueError):
        router.resolve_slug(["west-yorkshire", "leeds"], [])
    with pytest.raises(ValueError):
        router.resolve_slug([], [])


def test_canonical_path_round_trips_through_resolve() -> None:
    router = SlugRouter()
    siblings = [
        _facility("a", "Hot Box", "Newcastle upon Tyne", "Newcastle upon Tyne"),
        _facility("b", "Hot Box", "Gateshead", "Gateshead"),
        _facility("c", "Hot Box", "Gateshead", "Gateshead"),
    ]

    paths = router.canonical_paths(siblings)

    assert paths["a"] == FacilityPath("tyne-and-wear", "newcastle-upon-tyne", "hot-box")
    assert paths["c"].url("saunas") == "/saunas/tyne-and-wear/gateshead/hot-box-2"
    for facility in siblings:
        assert router.resolve_slug(list(paths[facility.id].segments), siblings) is facility


def test_canonical_path_uses_slug_fallback_for_unmapped_county() -> None:
    router = SlugRouter()
    sauna = _facility("a", "Island Heat", "Ryde", "Isle of Wight")

    path = router.canonical_path(sauna, [])

    assert path == FacilityPath("isle-of-wight", "ryde", "island-heat")
