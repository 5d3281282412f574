"""Tests for the onboarding completeness gate."""

from __future__ import annotations

import pytest

from app.user_profile import (
    DASHBOARD_ROUTE,
    ONBOARDING_ROUTE,
    Interest,
    UserProfile,
    is_profile_complete,
    onboarding_route,
)


def _profile(**overrides) -> UserProfile:
    fields = {
        "user_id": "EJDO123",
        "username": "jdoe",
        "full_name": "Jordan Doe",
        "location": "McLean, VA",
        "org": "Card Tech",
        "workspace": "HQ1",
        "interests": [Interest(id="i1", name="Python")],
    }
    fields.update(overrides)
    return UserProfile(**fields)


def test_none_profile_is_incomplete() -> None:
    assert is_profile_complete(None) is False
    assert onboarding_route(None) == ONBOARDING_ROUTE


def test_complete_profile_passes_gate() -> None:
    profile = _profile()
    assert is_profile_complete(profile) is True
    assert onboarding_route(profile) == DASHBOARD_ROUTE


@pytest.mark.parametrize("field", ["full_name", "location", "org", "workspace"])
@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_blank_required_field_fails_gate(field: str, value: str) -> None:
    profile = _profile(**{field: value})
    assert profile.interests
    assert is_profile_complete(profile) is False


def test_missing_required_field_fails_gate() -> None:
    profile = UserProfile.model_construct(
        user_id="EJDO123",
        username="jdoe",
        full_name="Jordan Doe",
        location=None,
        org="Card Tech",
        workspace="HQ1",
        interests=[Interest(id="i1", name="Python")],
    )
    assert is_profile_complete(profile) is False


def test_empty_interests_fail_gate() -> None:
    assert is_profile_complete(_profile(interests=[])) is False


def test_gate_does_not_mutate_profile() -> None:
    profile = _profile(full_name="  Jordan Doe  ")
    before = profile.model_dump()
    assert is_profile_complete(profile) is True
    assert profile.model_dump() == before


def test_profile_collapses_duplicate_interest_ids() -> None:
    profile = _profile(
        interests=[
            Interest(id="i1", name="Python"),
            Interest(id="i2", name="Chess"),
            Interest(id="i1", name="python"),
        ]
    )
    assert [interest.id for interest in profile.interests] == ["i1", "i2"]
    assert profile.interests[0].name == "Python"
