from __future__ import annotations

from pathlib import Path

from helpers.profiles import ProfileTree
from profilekit.core.config.settings import ProfileSettings
from profilekit.core.profiles import ChainEntry, ChainResolver, ProfileLocator, finalize, fold_chain


def _entry(key: str, document: dict) -> ChainEntry:
    return ChainEntry(key, document.get("name") or key, Path(f"/{key}.json"), document)


def test_base_child_example(profile_tree: ProfileTree, settings: ProfileSettings) -> None:
    profile_tree.user("base", {"name": "Base", "bed_temp": 60})
    profile_tree.user("child", {"name": "Child", "inherits": "base", "bed_temp": 65, "density": 1.24})
    chain = ChainResolver(ProfileLocator(settings)).resolve("child")

    assert finalize(chain, chain[-1].name) == {
        "name": "Child",
        "from": "User",
        "instantiation": "true",
        "type": "filament",
        "bed_temp": 65,
        "density": 1.24,
    }


def test_leaf_wins_and_nearest_ancestor_fills_gaps() -> None:
    chain = [
        _entry("c", {"a": "c", "b": "c", "c": "c"}),
        _entry("b", {"a": "b", "b": "b", "inherits": "c"}),
        _entry("a", {"a": "a", "inherits": "b"}),
    ]

    merged = finalize(chain, "a")

    assert (merged["a"], merged["b"], merged["c"]) == ("a", "b", "c")


def test_single_profile_keeps_its_fields() -> None:
    doc = {"name": "Solo", "from": "system", "type": "filament", "compatible": ["X1"], "inherits": ""}

    merged = finalize([_entry("solo", doc)], "Solo")

    assert merged == {
        "name": "Solo",
        "from": "system",
        "type": "filament",
        "compatible": ["X1"],
        "instantiation": "true",
    }


def test_inherits_is_removed() -> None:
    merged = finalize([_entry("p", {"name": "P"}), _entry("c", {"inherits": "p"})], "c")

    assert "inherits" not in merged


def test_from_comes_only_from_leaf() -> None:
    chain = [_entry("p", {"from": "system"}), _entry("c", {"inherits": "p"})]

    assert finalize(chain, "c")["from"] == "User"


def test_type_is_inherited_or_defaulted() -> None:
    inherited = finalize([_entry("p", {"type": "process"}), _entry("c", {"inherits": "p"})], "c")
    defaulted = finalize([_entry("c", {})], "c")

    assert inherited["type"] == "process"
    assert defaulted["type"] == "filament"


def test_custom_stamp_values() -> None:
    merged = finalize(
        [_entry("c", {})],
        "Custom",
        default_from="Vendor",
        default_type="material",
        instantiation="yes",
    )

    assert (merged["name"], merged["from"], merged["type"], merged["instantiation"]) == (
        "Custom",
        "Vendor",
        "material",
        "yes",
    )


def test_nested_objects_merge_across_chain() -> None:
    chain = [
        _entry("p", {"cooling": {"fan_min": 20, "fan_max": 80}}),
        _entry("c", {"cooling": {"fan_max": 100}}),
    ]

    assert fold_chain(chain) == {"cooling": {"fan_min": 20, "fan_max": 100}}


def test_chain_documents_are_not_mutated() -> None:
    parent = {"cooling": {"fan_min": 20}}
    child = {"cooling": {"fan_max": 100}, "inherits": "p"}
    chain = [_entry("p", parent), _entry("c", child)]

    merged = finalize(chain, "c")
    merged["cooling"]["fan_min"] = 0

    assert parent == {"cooling": {"fan_min": 20}}
    assert child == {"cooling": {"fan_max": 100}, "inherits": "p"}
