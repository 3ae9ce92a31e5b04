"""ProfileSearchService against an in-memory SQLite roster."""

import threading

import pytest

from talent_portal.core.exceptions import NotFoundException
from talent_portal.schemas.search import SearchQuery, SortDirection, SortField
from talent_portal.services.profile_search_service import ProfileSearchService
from talent_portal.services.search.zip_radius_client import ZipRadiusClient


@pytest.fixture
def service(db, geocoder):
    return ProfileSearchService(
        db, geocoder=geocoder, zip_radius_client=ZipRadiusClient(api_key="")
    )


@pytest.fixture
def roster(profile_factory):
    """Five managers (one inactive) and two other profiles."""
    return [
        profile_factory(first_name="Alice", professional_summary="Warehouse manager"),
        profile_factory(first_name="Bob", professional_summary="Office Manager, 10 years"),
        profile_factory(first_name="Carla", professional_summary="MANAGER of logistics"),
        profile_factory(first_name="Dan", professional_summary="Assistant manager"),
        profile_factory(first_name="Eve", professional_summary="Former manager", is_active=False),
        profile_factory(first_name="Frank", professional_summary="Forklift operator"),
        profile_factory(first_name="Gina", professional_summary="Receptionist"),
    ]


@pytest.mark.asyncio
async def test_keyword_total_counts_all_matches_beyond_page(service, roster):
    page = await service.search_profiles(SearchQuery(keywords=["manager"], limit=3))

    assert page.total == 4
    assert len(page.profiles) == 3
    assert page.total_pages == 2
    assert all(p.is_active for p in page.profiles)


@pytest.mark.asyncio
async def test_legacy_query_parameter_is_a_keyword(service, roster):
    page = await service.search_profiles(SearchQuery(query="forklift"))
    assert [p.first_name for p in page.profiles] == ["Frank"]


@pytest.mark.asyncio
async def test_keyword_with_like_wildcards_is_literal(service, profile_factory):
    profile_factory(first_name="Hal", professional_summary="100% reliable")
    profile_factory(first_name="Ivy", professional_summary="1000 hours")

    page = await service.search_profiles(SearchQuery(keywords=["0%"]))

    assert [p.first_name for p in page.profiles] == ["Hal"]


@pytest.mark.asyncio
async def test_pagination_walks_the_same_ordering(service, roster):
    first = await service.search_profiles(SearchQuery(page=1, limit=4))
    second = await service.search_profiles(SearchQuery(page=2, limit=4))

    assert first.total == second.total == 6
    assert first.total_pages == 2
    names = [p.first_name for p in first.profiles + second.profiles]
    assert names == ["Alice", "Bob", "Carla", "Dan", "Frank", "Gina"]


@pytest.mark.asyncio
async def test_page_past_the_end_is_empty_with_total(service, roster):
    page = await service.search_profiles(SearchQuery(page=10, limit=4))
    assert page.profiles == []
    assert page.total == 6


@pytest.mark.asyncio
async def test_sort_by_location_descending(service, profile_factory):
    profile_factory(first_name="A", city="Akron")
    profile_factory(first_name="C", city="Columbus")
    profile_factory(first_name="B", city="Brecksville")

    page = await service.search_profiles(
        SearchQuery(sort_by=SortField.LOCATION, sort_direction=SortDirection.DESC)
    )

    assert [p.city for p in page.profiles] == ["Columbus", "Brecksville", "Akron"]


@pytest.mark.asyncio
async def test_profession_and_state_filters(service, profile_factory):
    profile_factory(first_name="A", profession_type="Light Industrial", state="OH")
    profile_factory(first_name="B", profession_type="Light Industrial", state="PA")
    profile_factory(first_name="C", profession_type="Clerical", state="OH")

    page = await service.search_profiles(
        SearchQuery(profession_types=["industrial"], state="oh")
    )

    assert [p.first_name for p in page.profiles] == ["A"]


@pytest.mark.asyncio
async def test_zip_list_filter_without_radius(service, profile_factory):
    profile_factory(first_name="A", zip_code="44312")
    profile_factory(first_name="B", zip_code="44221")
    profile_factory(first_name="C", zip_code="43215")

    page = await service.search_profiles(SearchQuery(zip_codes=["44312", "43215"]))

    assert [p.first_name for p in page.profiles] == ["A", "C"]


@pytest.mark.asyncio
async def test_radius_search_keeps_profiles_within_distance(service, profile_factory):
    profile_factory(first_name="Near", zip_code="44312")
    profile_factory(first_name="Nearish", zip_code="44221")
    profile_factory(first_name="Cleveland", zip_code="44101")
    profile_factory(first_name="Columbus", zip_code="43215")
    profile_factory(first_name="Cincinnati", zip_code="45202")
    profile_factory(first_name="Unknown", zip_code="00501")

    page = await service.search_profiles(SearchQuery(zip_code="44289", radius=25))

    assert page.total == 2
    assert [p.first_name for p in page.profiles] == ["Near", "Nearish"]


@pytest.mark.asyncio
async def test_radius_search_respects_other_filters(service, profile_factory):
    profile_factory(first_name="Near", zip_code="44312", professional_summary="manager")
    profile_factory(first_name="Other", zip_code="44312", professional_summary="driver")

    page = await service.search_profiles(
        SearchQuery(keywords=["manager"], zip_code="44289", radius=25)
    )

    assert [p.first_name for p in page.profiles] == ["Near"]


@pytest.mark.asyncio
async def test_radius_with_no_hits_returns_empty_page(service, profile_factory):
    profile_factory(first_name="Far", zip_code="45202")

    page = await service.search_profiles(SearchQuery(zip_code="44289", radius=5))

    assert page.total == 0
    assert page.profiles == []
    assert page.total_pages == 0


@pytest.mark.asyncio
async def test_radius_around_unknown_center_narrows_to_state(service, profile_factory):
    profile_factory(first_name="Ohio", state="OH", zip_code="44312")
    profile_factory(first_name="Penn", state="PA", zip_code="15213")

    page = await service.search_profiles(SearchQuery(zip_code="00501", state="OH", radius=25))

    assert [p.first_name for p in page.profiles] == ["Ohio"]


@pytest.mark.asyncio
async def test_city_radius_search(service, profile_factory):
    profile_factory(first_name="Falls", city="Cuyahoga Falls", zip_code="44221")
    profile_factory(first_name="Cbus", city="Columbus", zip_code="43215")

    page = await service.search_profiles(SearchQuery(city="Akron", state="OH", radius=15))

    assert [p.first_name for p in page.profiles] == ["Falls"]


def test_get_profile_returns_active_profile(service, profile_factory):
    profile = profile_factory(first_name="Alice")
    assert service.get_profile(profile.id).first_name == "Alice"


def test_get_profile_hides_inactive_and_missing(service, profile_factory):
    hidden = profile_factory(is_active=False)
    with pytest.raises(NotFoundException) as exc:
        service.get_profile(hidden.id)
    assert exc.value.code == "PROFILE_NOT_FOUND"
    with pytest.raises(NotFoundException):
        service.get_profile("does-not-exist")


def test_filter_metadata(service, profile_factory):
    profile_factory(profession_type="Clerical", state="OH", office="Akron", city="Akron")
    profile_factory(profession_type="Clerical", state="PA", office="Pittsburgh", city="Pittsburgh")
    profile_factory(profession_type="Warehouse", state="OH", office="Akron", city="Akron")
    profile_factory(profession_type="Retired", state="WV", is_active=False)

    assert service.get_profession_types() == ["Clerical", "Warehouse"]
    states = service.get_states()
    assert [(s.code, s.name) for s in states] == [("OH", "Ohio"), ("PA", "Pennsylvania")]
    offices = service.get_offices()
    assert [(o.name, o.city, o.state) for o in offices] == [
        ("Akron", "Akron", "OH"),
        ("Pittsburgh", "Pittsburgh", "PA"),
    ]


@pytest.mark.asyncio
async def test_count_and_page_fetch_run_off_the_event_loop(service, roster, monkeypatch):
    loop_thread = threading.get_ident()
    threads = {}
    repository = service.profile_repository

    def recording(name):
        original = getattr(repository, name)

        def wrapper(*args, **kwargs):
            threads[name] = threading.get_ident()
            return original(*args, **kwargs)

        return wrapper

    for name in ("count_matching", "search", "find_candidates"):
        monkeypatch.setattr(repository, name, recording(name))

    page = await service.search_profiles(SearchQuery(zip_code="44289", radius=25))

    assert page.total == len(roster) - 1
    assert set(threads) == {"count_matching", "search", "find_candidates"}
    assert loop_thread not in threads.values()
