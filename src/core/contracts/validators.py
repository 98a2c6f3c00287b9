"""
Index/Range Contracts — JSON ↔ доменные модели

Сериализованные Index и Range проходят через JSON Schema (Draft 2020-12)
до построения pydantic модели, и модель проверяется той же схемой при
обратной сериализации.

Схемы поставляются как package data (src/core/contracts/schema/*.json)
и загружаются лениво через importlib.resources.

ИНВАРИАНТЫ:
1. load() возвращает модель только для данных, прошедших схему
2. dump() возвращает только данные, проходящие схему: Index с
   отрицательным value модель допускает, контракт — нет
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, ClassVar, Dict, Generic, Iterator, TypeVar

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from src.core.domain import Index, Range

M = TypeVar("M", bound=BaseModel)


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы из package data.

    Args:
        schema_name: Имя схемы без расширения ('index' или 'range')

    Returns:
        Схема как dict (кэшируется)

    Raises:
        FileNotFoundError: Если схема не поставляется с пакетом
        ValueError: Если файл не является валидной JSON Schema
    """
    resource = resources.files(__package__).joinpath("schema", f"{schema_name}.json")
    if not resource.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_name}.json")

    schema = json.loads(resource.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e
    return schema


class ModelContract(Generic[M]):
    """
    Связка JSON Schema и pydantic модели.

    Подклассы задают schema_name и model.
    """

    schema_name: ClassVar[str]
    model: ClassVar[type]

    def __init__(self) -> None:
        self.validator = Draft202012Validator(load_schema(self.schema_name))

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def load(self, data: Dict[str, Any]) -> M:
        """
        JSON данные → модель.

        Raises:
            ValidationError (jsonschema): Если данные не соответствуют схеме
        """
        self.validator.validate(data)
        return self.model.model_validate(data)

    def dump(self, instance: M) -> Dict[str, Any]:
        """
        Модель → JSON-совместимый dict, соответствующий схеме.

        Raises:
            ValidationError (jsonschema): Если модель не выражается контрактом
        """
        data = instance.model_dump(mode="json")
        self.validator.validate(data)
        return data


class IndexContract(ModelContract[Index]):
    schema_name = "index"
    model = Index


class RangeContract(ModelContract[Range]):
    schema_name = "range"
    model = Range


def validate_index(data: Dict[str, Any]) -> Index:
    """Проверка сериализованного Index и построение модели."""
    return IndexContract().load(data)


def validate_range(data: Dict[str, Any]) -> Range:
    """Проверка сериализованного Range и построение модели."""
    return RangeContract().load(data)


def dump_index(index: Index) -> Dict[str, Any]:
    return IndexContract().dump(index)


def dump_range(range_: Range) -> Dict[str, Any]:
    return RangeContract().dump(range_)
