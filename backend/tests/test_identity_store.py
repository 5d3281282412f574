"""Tests for identity resolution and profile persistence in the identity store."""

from __future__ import annotations

import re

import pytest

from app.identity_store import EidGenerationError, IdentityStore, is_eid, normalize_identity
from app.seed_data import demo_profiles
from app.user_profile import Interest, ProfileFields

SYNTHETIC_EID = re.compile(r"^[A-Z][A-Z]{3}\d{3}$")


class _StuckRandom:
    """Always produces the same EID candidate."""

    def choice(self, sequence):
        return sequence[0]

    def randint(self, low: int, high: int) -> int:
        return low


@pytest.fixture()
def store() -> IdentityStore:
    return IdentityStore()


def _fields(**overrides) -> ProfileFields:
    fields = {
        "full_name": "Jordan Doe",
        "location": "McLean, VA",
        "org": "Card Tech",
        "workspace": "HQ1",
        "interests": [Interest(id="i1", name="Python")],
    }
    fields.update(overrides)
    return ProfileFields(**fields)


def test_normalize_identity_trims_and_lowercases() -> None:
    assert normalize_identity("  JDoe ") == "jdoe"
    assert normalize_identity("") == ""
    assert normalize_identity(None) == ""


def test_eid_pattern() -> None:
    assert is_eid("EAB123")
    assert is_eid(" eab123 ")
    assert not is_eid("jdoe")
    assert not is_eid("Jordan Doe")
    assert not is_eid("1AB123")
    assert not is_eid("EAB1234")


def test_get_or_create_user_is_idempotent(store: IdentityStore) -> None:
    first = store.get_or_create_user("jdoe")
    second = store.get_or_create_user("jdoe")
    assert first.user_id == second.user_id
    assert first.profile is None
    assert len(store) == 1


def test_eid_identifier_becomes_user_id(store: IdentityStore) -> None:
    user = store.get_or_create_user("EAB123")
    assert user.user_id == "EAB123"
    assert user.username == "eab123"

    lowered = store.get_or_create_user("eab123")
    assert lowered.user_id == "EAB123"
    assert len(store) == 1


def test_free_form_identifier_gets_synthetic_eid(store: IdentityStore) -> None:
    user = store.get_or_create_user("Jordan Doe")
    assert SYNTHETIC_EID.match(user.user_id)
    assert user.user_id.startswith("E")
    assert user.username == "jordandoe"

    assert store.find_user_by_identifier("jordan doe").user_id == user.user_id
    assert store.find_user_by_identifier("JORDANDOE").user_id == user.user_id
    assert store.find_user_by_identifier(user.user_id.lower()).user_id == user.user_id


def test_find_user_by_identifier_trims_and_ignores_case(store: IdentityStore) -> None:
    created = store.get_or_create_user("jdoe")
    found = store.find_user_by_identifier(" JDoe ")
    assert found is not None
    assert found.user_id == created.user_id


def test_find_user_by_identifier_missing_returns_none(store: IdentityStore) -> None:
    assert store.find_user_by_identifier("nobody") is None
    assert store.find_user_by_identifier("   ") is None
    assert len(store) == 0


def test_get_or_create_user_rejects_blank_identifier(store: IdentityStore) -> None:
    with pytest.raises(ValueError):
        store.get_or_create_user("   ")


def test_generate_eid_avoids_existing_ids(store: IdentityStore) -> None:
    ids = {store.get_or_create_user(f"user {index}").user_id for index in range(25)}
    assert len(ids) == 25
    assert all(SYNTHETIC_EID.match(user_id) for user_id in ids)


def test_generate_eid_fails_loudly_when_exhausted() -> None:
    store = IdentityStore(eid_max_attempts=3, rng=_StuckRandom())  # type: ignore[arg-type]
    assert store.generate_eid() == "EAAA100"
    store.ensure_user("EAAA100")
    with pytest.raises(EidGenerationError):
        store.generate_eid()


def test_custom_eid_prefix() -> None:
    store = IdentityStore(eid_prefix="x", rng=_StuckRandom())  # type: ignore[arg-type]
    assert store.generate_eid() == "XAAA100"
    with pytest.raises(ValueError):
        IdentityStore(eid_prefix="7")


def test_ensure_user_creates_minimal_record(store: IdentityStore) -> None:
    user = store.ensure_user("EZZZ999")
    assert user.username == "ezzz999"
    assert user.profile is None
    assert store.find_user_by_identifier("ezzz999").user_id == "EZZZ999"

    again = store.ensure_user("EZZZ999", fallback_username="ignored")
    assert again.username == "ezzz999"


def test_ensure_user_uses_fallback_username(store: IdentityStore) -> None:
    user = store.ensure_user("EQRS321", fallback_username="qrs")
    assert user.username == "qrs"
    assert store.find_user_by_identifier("QRS").user_id == "EQRS321"


def test_get_user_by_id_does_not_normalize(store: IdentityStore) -> None:
    store.get_or_create_user("EAB123")
    assert store.get_user_by_id("EAB123") is not None
    assert store.get_user_by_id("eab123") is None


def test_save_user_profile_builds_canonical_profile(store: IdentityStore) -> None:
    user = store.get_or_create_user("jdoe")
    profile = store.save_user_profile(user.user_id, _fields(full_name="Jordan Q. Doe"))

    assert profile.user_id == user.user_id
    assert profile.username == "jdoe"
    assert store.get_user_profile(user.user_id) == profile
    assert store.find_user_by_identifier("jordan q. doe").user_id == user.user_id


def test_save_user_profile_creates_unknown_user(store: IdentityStore) -> None:
    profile = store.save_user_profile("ENEW100", _fields())
    assert profile.username == "enew100"
    assert store.get_user_by_id("ENEW100") is not None


def test_save_user_profile_replaces_whole_record(store: IdentityStore) -> None:
    user = store.get_or_create_user("jdoe")
    store.save_user_profile(user.user_id, _fields(bio="First"))
    replaced = store.save_user_profile(user.user_id, _fields(bio=None))
    assert replaced.bio is None


def test_get_user_profile_missing_paths_return_none(store: IdentityStore) -> None:
    assert store.get_user_profile("EMISSING") is None
    user = store.get_or_create_user("jdoe")
    assert store.get_user_profile(user.user_id) is None


def test_returned_records_are_copies(store: IdentityStore) -> None:
    user = store.get_or_create_user("jdoe")
    store.save_user_profile(user.user_id, _fields())

    fetched = store.get_user_profile(user.user_id)
    fetched.location = "Elsewhere"
    fetched.interests.clear()

    stored = store.get_user_profile(user.user_id)
    assert stored.location == "McLean, VA"
    assert len(stored.interests) == 1


def test_seeded_users_resolve_by_any_identity(store: IdentityStore) -> None:
    store.seed(demo_profiles())
    assert len(store) == 5
    for identifier in ("ENA492", "ena492", "avangoor", "Ananya Vangoor"):
        found = store.find_user_by_identifier(identifier)
        assert found is not None
        assert found.user_id == "ENA492"
        assert found.profile is not None

    relogin = store.get_or_create_user("Ananya Vangoor")
    assert relogin.user_id == "ENA492"
    assert len(store) == 5


def test_list_users_returns_every_record(store: IdentityStore) -> None:
    store.seed(demo_profiles())
    store.get_or_create_user("jdoe")
    users = store.list_users()
    assert len(users) == 6
    assert {"ENA487", "ENA495"} <= {user.user_id for user in users}


def test_full_name_cannot_take_another_users_login_key(store: IdentityStore) -> None:
    alice = store.get_or_create_user("EAB123")
    bob = store.get_or_create_user("Bob Smith")

    store.save_user_profile(bob.user_id, _fields(full_name="eab123"))

    assert store.find_user_by_identifier("eab123").user_id == alice.user_id
    assert store.get_or_create_user("EAB123").user_id == alice.user_id
    assert store.find_user_by_identifier("bobsmith").user_id == bob.user_id


def test_ensure_user_does_not_take_existing_username(store: IdentityStore) -> None:
    real = store.get_or_create_user("jdoe")
    assert real.user_id != "jdoe"

    shadow = store.ensure_user("jdoe")

    assert shadow.user_id == "jdoe"
    assert store.get_user_by_id("jdoe") is not None
    assert store.find_user_by_identifier("jdoe").user_id == real.user_id
    assert store.find_user_by_identifier(real.user_id).user_id == real.user_id


def test_saving_own_identity_keys_is_stable(store: IdentityStore) -> None:
    user = store.get_or_create_user("jdoe")
    store.save_user_profile(user.user_id, _fields(full_name="Jordan Doe"))
    store.save_user_profile(user.user_id, _fields(full_name="Jordan Q. Doe"))

    for identifier in ("jdoe", user.user_id, "Jordan Doe", "jordan q. doe"):
        assert store.find_user_by_identifier(identifier).user_id == user.user_id
