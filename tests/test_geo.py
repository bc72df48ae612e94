"""Tests for the location bonus."""

import pytest

from models.config import PreferredArea, ScoringConfig
from scoring.geo import haversine_km, location_bonus

DOLORES_LON, DOLORES_LAT = -122.4261, 37.7598

# Latitude offsets from the centroid: ~0.78 km, ~1.20 km, ~2.22 km
NEAR = 0.007
HALF = 0.0108
FAR = 0.02


def _config(*areas: PreferredArea) -> ScoringConfig:
    return ScoringConfig(preferred_areas=list(areas))


def _area(name="Dolores Heights", lat=DOLORES_LAT, lon=DOLORES_LON, weight=30, zip="94110"):
    return PreferredArea(name=name, centroid=(lon, lat), weight=weight, zip=zip)


class TestHaversine:
    def test_zero_distance(self):
        assert haversine_km(DOLORES_LAT, DOLORES_LON, DOLORES_LAT, DOLORES_LON) == 0

    def test_one_degree_of_latitude(self):
        assert haversine_km(0, 0, 1, 0) == pytest.approx(111.195, rel=1e-3)

    def test_offsets_used_below(self):
        assert haversine_km(DOLORES_LAT, DOLORES_LON, DOLORES_LAT + NEAR, DOLORES_LON) < 0.8
        assert 0.8 < haversine_km(DOLORES_LAT, DOLORES_LON, DOLORES_LAT + HALF, DOLORES_LON) < 1.5
        assert haversine_km(DOLORES_LAT, DOLORES_LON, DOLORES_LAT + FAR, DOLORES_LON) > 1.5


class TestLocationBonus:
    def test_at_centroid_gets_full_weight(self):
        assert location_bonus(DOLORES_LAT, DOLORES_LON, None, _config(_area())) == 30

    def test_inside_full_radius(self):
        assert location_bonus(DOLORES_LAT + NEAR, DOLORES_LON, None, _config(_area())) == 30

    def test_half_radius_gets_half_weight(self):
        assert location_bonus(DOLORES_LAT + HALF, DOLORES_LON, None, _config(_area())) == 15

    def test_beyond_half_radius(self):
        assert location_bonus(DOLORES_LAT + FAR, DOLORES_LON, None, _config(_area())) == 0

    def test_zip_fallback_is_flat(self):
        config = _config(_area(weight=30))
        assert location_bonus(None, None, "94110", config) == 5

    def test_zip_ignored_when_coordinates_present(self):
        assert location_bonus(DOLORES_LAT + FAR, DOLORES_LON, "94110", _config(_area())) == 0

    def test_one_coordinate_falls_back_to_zip(self):
        assert location_bonus(DOLORES_LAT, None, "94110", _config(_area())) == 5

    def test_no_location_at_all(self):
        assert location_bonus(None, None, None, _config(_area())) == 0
        assert location_bonus(None, None, "10001", _config(_area())) == 0

    def test_half_matches_take_max_not_sum(self):
        config = _config(
            _area(name="A", weight=30),
            _area(name="B", weight=20),
        )
        assert location_bonus(DOLORES_LAT + HALF, DOLORES_LON, None, config) == 15

    def test_full_match_stops_scan_but_keeps_higher_half(self):
        listing_lat = DOLORES_LAT + HALF
        half_area = _area(name="A", weight=30)
        full_area = _area(name="B", lat=listing_lat, weight=10)

        assert location_bonus(listing_lat, DOLORES_LON, None, _config(half_area, full_area)) == 15
        # Order matters: a full match first ends the scan
        assert location_bonus(listing_lat, DOLORES_LON, None, _config(full_area, half_area)) == 10

    def test_default_preferred_areas(self):
        assert location_bonus(DOLORES_LAT, DOLORES_LON, None) == 30
        assert location_bonus(None, None, "94133") == 5
