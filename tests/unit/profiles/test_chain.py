from __future__ import annotations

import json

import pytest

from helpers.profiles import ProfileTree
from profilekit.core.config.settings import ProfileSettings
from profilekit.core.exceptions import ProfileCycleError, ProfileNotFoundError, ProfileParseError
from profilekit.core.profiles import ChainResolver, ProfileLocator


def _resolver(settings: ProfileSettings) -> ChainResolver:
    return ChainResolver(ProfileLocator(settings))


def test_profile_without_parent_is_single_entry_chain(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    path = profile_tree.user("solo", {"name": "Solo", "bed_temp": 60})

    chain = _resolver(settings).resolve("solo")

    assert len(chain) == 1
    assert chain[0].key == "solo"
    assert chain[0].name == "Solo"
    assert chain[0].path == path
    assert chain[0].document == {"name": "Solo", "bed_temp": 60}


def test_chain_is_ordered_root_first(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    profile_tree.base("c", {"name": "C"})
    profile_tree.system("b", {"name": "B", "inherits": "c"})
    profile_tree.user("a", {"name": "A", "inherits": "b"})

    chain = _resolver(settings).resolve("a")

    assert [e.key for e in chain] == ["c", "b", "a"]
    assert [e.name for e in chain] == ["C", "B", "A"]
    assert chain[-1].parent == "b"
    assert chain[0].parent is None


def test_display_name_falls_back_to_lookup_key(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    profile_tree.user("nameless", {"bed_temp": 60})
    profile_tree.user("blank", {"name": "", "inherits": "nameless"})

    chain = _resolver(settings).resolve("blank")

    assert [e.name for e in chain] == ["nameless", "blank"]


def test_empty_inherits_ends_the_chain(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    profile_tree.user("custom", {"name": "Custom", "inherits": ""})

    assert [e.key for e in _resolver(settings).resolve("custom")] == ["custom"]


def test_non_string_inherits_ends_the_chain(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    profile_tree.user("odd", {"inherits": ["a", "b"]})

    assert len(_resolver(settings).resolve("odd")) == 1


def test_self_reference_is_a_cycle(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    profile_tree.user("loop", {"inherits": "loop"})

    with pytest.raises(ProfileCycleError) as excinfo:
        _resolver(settings).resolve("loop")

    assert excinfo.value.name == "loop"


def test_two_profile_cycle_is_detected(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    profile_tree.user("x", {"inherits": "y"})
    profile_tree.system("y", {"inherits": "x"})

    with pytest.raises(ProfileCycleError) as excinfo:
        _resolver(settings).resolve("x")

    assert excinfo.value.name in {"x", "y"}
    assert excinfo.value.chain == ["x", "y"]
    assert "x -> y -> x" in str(excinfo.value)


def test_missing_parent_raises_not_found(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    profile_tree.user("orphan", {"inherits": "ghost"})

    with pytest.raises(ProfileNotFoundError) as excinfo:
        _resolver(settings).resolve("orphan")

    assert excinfo.value.name == "ghost"


def test_missing_start_raises_not_found(settings: ProfileSettings) -> None:
    with pytest.raises(ProfileNotFoundError) as excinfo:
        _resolver(settings).resolve("nothing")

    assert excinfo.value.name == "nothing"


def test_parse_errors_propagate(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    profile_tree.user("child", {"inherits": "broken"})
    profile_tree.write_raw(profile_tree.library_dir, "broken.json", "{oops")

    with pytest.raises(ProfileParseError):
        _resolver(settings).resolve("child")


def test_non_object_document_is_rejected(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    profile_tree.write_raw(profile_tree.user_dir(), "list.json", json.dumps([1, 2, 3]))

    with pytest.raises(ProfileParseError):
        _resolver(settings).resolve("list")


def test_custom_loader_is_used(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    profile_tree.user("a", {})
    seen = []

    def _loader(path):
        seen.append(path.name)
        return {"name": "Loaded"}

    chain = ChainResolver(ProfileLocator(settings), loader=_loader).resolve("a")

    assert seen == ["a.json"]
    assert chain[0].name == "Loaded"
