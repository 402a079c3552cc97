from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from src.core.types import (
    MapPropertySource,
    OriginTrackedMapPropertySource,
    OriginTrackedValue,
    TextResourceOrigin,
)


def test_origin_string_form() -> None:
    origin = TextResourceOrigin("file [app.properties]", 3, 7)
    assert str(origin) == "file [app.properties] - 3:7"
    assert origin.to_dict() == {"resource": "file [app.properties]", "line": 3, "column": 7}


def test_origin_is_one_based() -> None:
    with pytest.raises(ValueError, match="line"):
        TextResourceOrigin("r", 0, 1)
    with pytest.raises(ValueError, match="column"):
        TextResourceOrigin("r", 1, 0)


def test_origin_tracked_value_str() -> None:
    assert str(OriginTrackedValue("8080", TextResourceOrigin("r", 1, 1))) == "8080"
    assert OriginTrackedValue("x").origin is None


def test_map_property_source_accessors() -> None:
    source = MapPropertySource(name="app", source={"b": "2", "a": "1"})

    assert source.property_names == ["b", "a"]
    assert source.get_property("a") == "1"
    assert source.get_property("missing") is None
    assert source.contains_property("b")
    assert not source.contains_property("c")
    assert source.get_origin("a") is None
    assert source.origin_tracked is False
    assert len(source) == 2


def test_map_property_source_copies_input() -> None:
    raw = {"a": "1"}
    source = MapPropertySource(name="app", source=raw)
    raw["a"] = "changed"
    raw["b"] = "new"

    assert dict(source.source) == {"a": "1"}


def test_map_property_source_is_immutable() -> None:
    source = MapPropertySource(name="app", source={"a": "1"})

    with pytest.raises(TypeError):
        source.source["a"] = "2"  # type: ignore[index]
    with pytest.raises(FrozenInstanceError):
        source.name = "other"  # type: ignore[misc]


def test_map_property_source_requires_name() -> None:
    with pytest.raises(ValueError, match="name cannot be empty"):
        MapPropertySource(name="", source={})


def test_map_property_source_to_dict() -> None:
    source = MapPropertySource(name="app", source={"a": "1"})
    assert source.to_dict() == {"name": "app", "origin_tracked": False, "properties": {"a": "1"}}


def test_origin_tracked_source_from_values() -> None:
    origin_a = TextResourceOrigin("r", 1, 3)
    origin_b = TextResourceOrigin("r", 2, 3)
    source = OriginTrackedMapPropertySource.from_tracked_values(
        "app",
        {"a": OriginTrackedValue("1", origin_a), "b": OriginTrackedValue("2", origin_b)},
    )

    assert source.origin_tracked is True
    assert dict(source.source) == {"a": "1", "b": "2"}
    assert source.get_origin("a") == origin_a
    assert source.get_origin("b") == origin_b
    assert source.get_origin("c") is None


def test_origin_tracked_source_accepts_pairs_and_missing_origins() -> None:
    source = OriginTrackedMapPropertySource.from_tracked_values(
        "app",
        [
            ("a", OriginTrackedValue("1", TextResourceOrigin("r", 1, 3))),
            ("a", OriginTrackedValue("2")),
        ],
    )

    assert source.get_property("a") == "2"
    assert source.get_origin("a") is None


def test_origin_tracked_source_rejects_unknown_origins() -> None:
    with pytest.raises(ValueError, match="unknown properties: b"):
        OriginTrackedMapPropertySource(
            name="app", source={"a": "1"}, origins={"b": TextResourceOrigin("r", 1, 1)}
        )


def test_origin_tracked_source_to_dict() -> None:
    source = OriginTrackedMapPropertySource.from_tracked_values(
        "app", {"a": OriginTrackedValue("1", TextResourceOrigin("r", 1, 3))}
    )

    assert source.to_dict() == {
        "name": "app",
        "origin_tracked": True,
        "properties": {"a": "1"},
        "origins": {"a": {"resource": "r", "line": 1, "column": 3}},
    }
