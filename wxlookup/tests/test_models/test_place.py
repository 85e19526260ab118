"""Tests for place models."""

import dataclasses

import pytest

from wxlookup.models.place import Place, synthetic_place


class TestPlace:
    def test_label_skips_empty_parts(self):
        assert Place(1, "Tampa", 1.0, 2.0, country="United States", admin1="Florida").label == (
            "Tampa, Florida, United States"
        )
        assert Place(2, "Paris", 1.0, 2.0, country="France").label == "Paris, France"
        assert Place(3, "Nowhere", 1.0, 2.0, admin1="").label == "Nowhere"

    def test_from_api(self):
        place = Place.from_api(
            {"id": 7, "name": "Bergen", "latitude": 60.39, "longitude": 5.32,
             "country": "Norway", "admin1": "Vestland", "admin4": "x"}
        )
        assert place.id == 7
        assert place.admin4 == "x"
        assert place.admin2 is None

    def test_from_api_missing_coordinates(self):
        with pytest.raises(KeyError):
            Place.from_api({"id": 7, "name": "Bergen"})

    def test_synthetic(self):
        place = synthetic_place(27.95, -82.46)
        assert place.id == 0
        assert place.label == "(27.950, -82.460)"

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            synthetic_place(1.0, 2.0).name = "x"
