"""
Tests for Index/Range JSON Schema contracts

- Схемы поставляются с пакетом и проходят meta-валидацию
- validate_* строят модели только из данных, прошедших схему
- dump_* отдают данные, соответствующие схеме
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    IndexContract,
    RangeContract,
    dump_index,
    dump_range,
    load_schema,
    validate_index,
    validate_range,
)
from src.core.domain import Index, Range


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_index() -> dict:
    """Валидный index для тестирования."""
    return {"value": 2, "from_end": True}


@pytest.fixture
def valid_range() -> dict:
    """Валидный range для тестирования."""
    return {
        "start": {"value": 1, "from_end": False},
        "end": {"value": 1, "from_end": True},
    }


class TestLoadSchema:
    """Тесты загрузки схем из package data"""

    @pytest.mark.parametrize("name", ["index", "range"])
    def test_schemas_load(self, name: str) -> None:
        assert load_schema(name)["title"].lower() == name

    def test_schema_cached(self) -> None:
        assert load_schema("index") is load_schema("index")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")


class TestIndexContract:
    """Тесты index контракта"""

    def test_load_builds_model(self, valid_index: dict) -> None:
        idx = validate_index(valid_index)
        assert idx == Index(2, from_end=True)
        assert idx.resolve(10) == 8

    def test_missing_required(self) -> None:
        with pytest.raises(ValidationError):
            validate_index({"value": 1})

    def test_wrong_type(self) -> None:
        with pytest.raises(ValidationError):
            validate_index({"value": "1", "from_end": False})

    def test_additional_property_rejected(self, valid_index: dict) -> None:
        valid_index["extra"] = 1
        assert not IndexContract().is_valid(valid_index)

    def test_dump_conforms(self) -> None:
        assert dump_index(Index(3, from_end=True)) == {"value": 3, "from_end": True}

    def test_dump_rejects_negative_value(self) -> None:
        """Модель допускает отрицательный value, контракт — нет"""
        with pytest.raises(ValidationError):
            dump_index(Index(-1))

    def test_json_text_roundtrip(self) -> None:
        idx = Index(4)
        assert validate_index(json.loads(json.dumps(dump_index(idx)))) == idx


class TestRangeContract:
    """Тесты range контракта"""

    def test_load_builds_model(self, valid_range: dict) -> None:
        rng = validate_range(valid_range)
        assert rng == Range(Index(1), Index(1, from_end=True))
        assert rng.resolve(5) == (1, 4)

    def test_missing_end(self, valid_range: dict) -> None:
        del valid_range["end"]
        with pytest.raises(ValidationError):
            validate_range(valid_range)

    def test_nested_index_validated(self, valid_range: dict) -> None:
        valid_range["start"] = {"value": 1}
        assert len(list(RangeContract().iter_errors(valid_range))) >= 1
        with pytest.raises(ValidationError):
            validate_range(valid_range)

    @pytest.mark.parametrize(
        "rng",
        [Range.all(), Range.start_at(Index(3)), Range.end_at(Index(2, from_end=True))],
    )
    def test_dump_then_load(self, rng: Range) -> None:
        assert validate_range(dump_range(rng)) == rng
