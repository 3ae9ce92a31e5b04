from pydantic import ValidationError
import pytest

from talent_portal.schemas.search import SearchQuery, SortDirection, SortField, split_csv


def test_split_csv_drops_blanks():
    assert split_csv(" manager, ,forklift ,") == ["manager", "forklift"]
    assert split_csv(None) == []
    assert split_csv("") == []


def test_keywords_take_precedence_over_legacy_query():
    assert SearchQuery(keywords=["manager"], query="driver").effective_keywords == ["manager"]
    assert SearchQuery(query="driver").effective_keywords == ["driver"]
    assert SearchQuery().effective_keywords == []


def test_radius_must_be_positive_to_apply():
    assert not SearchQuery().has_radius
    assert not SearchQuery(radius=0).has_radius
    assert not SearchQuery(radius=-5).has_radius
    assert SearchQuery(radius=10).has_radius


def test_center_zip_codes_merge_single_and_list():
    query = SearchQuery(zip_code="44289", zip_codes=["44312", "44289", " "])
    assert query.center_zip_codes == ["44289", "44312"]


def test_text_fields_are_trimmed_and_state_upper_cased():
    query = SearchQuery(city="  Akron ", state=" oh", office=" ")
    assert query.city == "Akron"
    assert query.state == "OH"
    assert query.office is None


def test_offset_and_defaults():
    query = SearchQuery(page=3, limit=25)
    assert query.offset == 50
    assert query.sort_by is SortField.NAME
    assert query.sort_direction is SortDirection.ASC


@pytest.mark.parametrize(
    "field,value", [("page", 0), ("page", 100_001), ("limit", 0), ("limit", 1001)]
)
def test_page_window_bounds(field, value):
    with pytest.raises(ValidationError):
        SearchQuery(**{field: value})


def test_query_is_immutable():
    query = SearchQuery(city="Akron")
    with pytest.raises(ValidationError):
        query.city = "Cleveland"


@pytest.mark.parametrize(
    "overrides", [{"zip_code": "44\x01289"}, {"zip_codes": ["44312", "44\n289"]}]
)
def test_postal_codes_with_control_characters_are_rejected(overrides):
    with pytest.raises(ValidationError):
        SearchQuery(**overrides)
