from talent_portal.repositories import SpatialRepository


def test_spatial_search_unavailable_off_postgres(db, profile_factory):
    profile_factory()
    assert SpatialRepository(db).has_geo_locations() is False


def test_ids_within_with_no_centers_is_empty(db):
    assert SpatialRepository(db).ids_within([], 1000.0) == []
