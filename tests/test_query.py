from __future__ import annotations

from catalog.query import QueryEngine, QueryState, available_regions, filter_countries, name_sort_key
from conftest import make_country


def names(countries):
    return [c.name for c in countries]


def test_search_is_case_insensitive_and_sorted(five_countries):
    result = filter_countries(five_countries, "united", "all", "name")
    assert names(result) == ["United Arab Emirates", "United Kingdom", "United States"]


def test_empty_search_matches_everything(five_countries):
    assert len(filter_countries(five_countries, "", "all", "name")) == 5


def test_region_filter_is_exact(five_countries):
    assert names(filter_countries(five_countries, "", "Europe", "name")) == ["France", "United Kingdom"]
    assert filter_countries(five_countries, "", "europe", "name") == []


def test_search_and_region_compose(five_countries):
    assert names(filter_countries(five_countries, "UNITED", "Americas", "name")) == ["United States"]


def test_sort_orders(five_countries):
    assert names(filter_countries(five_countries, sort_key="name-desc"))[0] == "United States"
    pops = [c.population for c in filter_countries(five_countries, sort_key="population")]
    assert pops == sorted(pops, reverse=True)
    pops = [c.population for c in filter_countries(five_countries, sort_key="population-asc")]
    assert pops == sorted(pops)


def test_unknown_sort_key_keeps_input_order(five_countries):
    assert filter_countries(five_countries, sort_key="bogus") == five_countries


def test_filter_does_not_mutate_and_is_repeatable(five_countries):
    before = list(five_countries)
    first = filter_countries(five_countries, "united", "all", "population")
    second = filter_countries(five_countries, "united", "all", "population")
    assert first == second
    assert first is not five_countries
    assert five_countries == before


def test_accented_names_sort_with_their_base_letter():
    countries = [make_country("Zambia", "ZMB"), make_country("Åland Islands", "ALA"), make_country("Albania", "ALB")]
    assert names(filter_countries(countries, sort_key="name")) == ["Åland Islands", "Albania", "Zambia"]
    assert name_sort_key("Éire") < name_sort_key("Fiji")


def test_available_regions(five_countries):
    assert available_regions(five_countries) == ["Americas", "Asia", "Europe"]


def test_query_engine_holds_state(five_countries):
    engine = QueryEngine()
    assert engine.state == QueryState()
    engine.update(search_term="united", sort_key="population")
    assert names(engine.apply(five_countries)) == ["United States", "United Kingdom", "United Arab Emirates"]
    engine.update(region="Europe")
    assert names(engine.apply(five_countries)) == ["United Kingdom"]
    engine.reset()
    assert len(engine.apply(five_countries)) == 5


def test_search_term_is_not_trimmed(five_countries):
    assert names(filter_countries(five_countries, " ", "all", "name")) == [
        "United Arab Emirates",
        "United Kingdom",
        "United States",
    ]
    assert filter_countries(five_countries, " france", "all", "name") == []
