"""
Range — Полуоткрытый интервал [start, end) из двух Index

Immutable Pydantic модель. Чистый дескриптор пары позиций: start и end
разрешаются независимо относительно одной и той же длины L.

ИНВАРИАНТЫ:
1. start <= end НЕ проверяется: пустой или "перевёрнутый" Range допустим
2. resolve() не делает clamp; clamp выполняют потребители (to_slice, take)
"""

from collections.abc import Sequence, Sized
from typing import Any, TypeVar, Union

from pydantic import BaseModel, Field, field_validator

from src.core.domain.index import Index

T = TypeVar("T")

IndexLike = Union[Index, int]


def _as_index(value: IndexLike) -> Index:
    if isinstance(value, Index):
        return value
    return Index(value)


class Range(BaseModel):
    """
    Интервал [start, end).

    Сериализуется в контракт range ({"start": {...}, "end": {...}}).
    """

    start: Index = Field(..., description="Начало интервала (включительно)")
    end: Index = Field(..., description="Конец интервала (исключительно)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, start: IndexLike, end: IndexLike, **data: Any) -> None:
        """
        Позиционное создание Range(start, end).

        Args:
            start: Начало (включительно); int трактуется как Index от начала
            end: Конец (исключительно); порядок start <= end не проверяется
        """
        super().__init__(start=start, end=end, **data)

    @field_validator("start", "end", mode="before")
    @classmethod
    def coerce_int_endpoint(cls, v: Any) -> Any:
        """Целое число трактуется как Index от начала"""
        if isinstance(v, int) and not isinstance(v, bool):
            return Index(v)
        return v

    @classmethod
    def start_at(cls, start: IndexLike) -> "Range":
        """Range от start до конца последовательности: [start, ^0)"""
        return cls(_as_index(start), Index.end())

    @classmethod
    def end_at(cls, end: IndexLike) -> "Range":
        """Range от начала последовательности до end: [0, end)"""
        return cls(Index.start(), _as_index(end))

    @classmethod
    def all(cls) -> "Range":
        """Вся последовательность: [0, ^0)"""
        return cls(Index.start(), Index.end())

    def resolve(self, length: int) -> tuple[int, int]:
        """
        Разрешение обеих границ относительно длины.

        Args:
            length: Длина последовательности

        Returns:
            (start_offset, end_offset) без clamp и без проверки порядка

        Examples:
            >>> Range.all().resolve(5)
            (0, 5)
            >>> Range(Index(1), Index(1, from_end=True)).resolve(5)
            (1, 4)
        """
        return self.start.resolve(length), self.end.resolve(length)

    def get_offsets(self, sequence: Sized) -> tuple[int, int]:
        return self.resolve(len(sequence))

    def to_slice(self, length: int) -> slice:
        """
        Builtin slice для последовательности длины length.

        Оба offset ограничиваются диапазоном [0, length];
        при start >= end возвращается пустой slice.

        Args:
            length: Длина последовательности

        Returns:
            slice(s, e) с 0 <= s <= e <= length
        """
        s, e = self.resolve(length)
        s = min(max(s, 0), length)
        e = min(max(e, 0), length)
        if s >= e:
            return slice(s, s)
        return slice(s, e)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


def take(sequence: Sequence[T], range_: Range) -> Sequence[T]:
    """
    Подпоследовательность, выбранная Range (с clamp).

    Тип результата совпадает с типом нарезки контейнера:
    list → list, str → str, tuple → tuple.

    Examples:
        >>> take([1, 2, 3, 4, 5], Range.start_at(Index(2, from_end=True)))
        [4, 5]
        >>> take("hello", Range(Index(1), Index(1, from_end=True)))
        'ell'
    """
    return sequence[range_.to_slice(len(sequence))]
