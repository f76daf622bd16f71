"""Tests for the density heuristic."""

import pytest

from serving_units.services.density import density_of


def test_specific_keywords_win_over_generic() -> None:
    assert density_of("Brown Sugar, packed") == pytest.approx(220 / 236.588)
    assert density_of("sugar, granulated") == pytest.approx(200 / 236.588)
    assert density_of("Bread flour") == pytest.approx(130 / 236.588)
    assert density_of("cake flour") == pytest.approx(115 / 236.588)
    assert density_of("all-purpose flour") == pytest.approx(120 / 236.588)
    assert density_of("confectioners sugar") == pytest.approx(120 / 236.588)


def test_common_ingredients() -> None:
    assert density_of("Butter, salted") == pytest.approx(227 / 236.588)
    assert density_of("whole milk") == pytest.approx(245 / 236.588)
    assert density_of("olive oil") == pytest.approx(218 / 236.588)
    assert density_of("rolled oats") == pytest.approx(90 / 236.588)


def test_water_matches_exact_name_only() -> None:
    assert density_of("Water") == 1.0
    assert density_of("Consumer water, bottled") == 1.0
    assert density_of("watermelon") is None


def test_unknown_food_has_no_density() -> None:
    assert density_of("granite") is None
    assert density_of("") is None
