from messenger.domain.entities.user import User
from messenger.infrastructure.persistence import UserManager


def test_seeded_users_sorted_by_username(user_manager):
    assert [u.username for u in user_manager.list_all()] == ["alice", "bob", "charlie"]


def test_list_all_excludes_caller(user_manager):
    assert [u.username for u in user_manager.list_all("alice")] == ["bob", "charlie"]


def test_search_matches_substring_excluding_caller(user_manager):
    results = user_manager.search("ali", exclude_username="bob")
    assert [u.username for u in results] == ["alice"]


def test_search_is_case_insensitive_and_covers_full_name(user_manager):
    assert [u.username for u in user_manager.search("SMITH")] == ["bob"]
    assert [u.username for u in user_manager.search("brown")] == ["charlie"]


def test_add_rejects_duplicate_username(user_manager):
    duplicate = User("alice", "other@example.com", "Other", False, 0, 0)
    assert user_manager.add(duplicate) is False
    assert user_manager.get("alice").email == "alice@example.com"


def test_partial_update_keeps_unset_fields(user_manager):
    assert user_manager.update("bob", full_name="Robert Smith") is True
    bob = user_manager.get("bob")
    assert bob.full_name == "Robert Smith"
    assert bob.email == "bob@example.com"


def test_update_unknown_user_returns_false(user_manager):
    assert user_manager.update("nobody", full_name="X") is False


def test_set_online_status_updates_last_seen(clock):
    manager = UserManager(seed=True, clock=clock)
    clock.advance(120)
    assert manager.set_online_status("bob", True) is True
    bob = manager.get("bob")
    assert bob.is_online is True
    assert bob.last_seen == int(clock.now)


def test_get_returns_copy(user_manager):
    alice = user_manager.get("alice")
    alice.full_name = "Mallory"
    assert user_manager.get("alice").full_name == "Alice Johnson"


def test_unseeded_manager_is_empty():
    manager = UserManager()
    assert manager.list_all() == []
    assert manager.get("alice") is None
    assert manager.exists("alice") is False
