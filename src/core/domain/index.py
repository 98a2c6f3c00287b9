"""
Index — Позиция в последовательности (от начала или от конца)

Immutable Pydantic модель, описывающая позицию в последовательности,
длина которой на момент создания неизвестна.

Разрешение в абсолютный offset:
    resolve(L) = L - value   если from_end
    resolve(L) = value       иначе

ИНВАРИАНТЫ:
1. Модель неизменяема (frozen=True)
2. Границы НЕ проверяются ни при создании, ни при разрешении:
   отрицательный результат или результат > L — ответственность вызывающего
"""

from collections.abc import Sized
from typing import Any

from pydantic import BaseModel, Field, StrictBool, StrictInt


class Index(BaseModel):
    """
    Позиция в последовательности.

    Сериализуется в контракт index ({"value": int, "from_end": bool}).
    """

    value: StrictInt = Field(..., description="Offset (неотрицательный по соглашению)")
    from_end: StrictBool = Field(False, description="Отсчёт от конца последовательности")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: int, from_end: bool = False, **data: Any) -> None:
        """
        Позиционное создание Index(value, from_end).

        Args:
            value: Offset (границы не проверяются)
            from_end: True — отсчёт от конца последовательности
        """
        super().__init__(value=value, from_end=from_end, **data)

    @classmethod
    def from_start(cls, value: int) -> "Index":
        """Index, отсчитанный от начала."""
        return cls(value, from_end=False)

    @classmethod
    def from_end_of(cls, value: int) -> "Index":
        """Index, отсчитанный от конца (^value)."""
        return cls(value, from_end=True)

    @classmethod
    def start(cls) -> "Index":
        """Первый элемент (0)."""
        return cls(0, from_end=False)

    @classmethod
    def end(cls) -> "Index":
        """Позиция сразу за последним элементом (^0)."""
        return cls(0, from_end=True)

    @property
    def is_from_end(self) -> bool:
        return self.from_end

    def resolve(self, length: int) -> int:
        """
        Разрешение в абсолютный zero-based offset.

        Args:
            length: Длина последовательности

        Returns:
            length - value если from_end, иначе value (без clamp)

        Examples:
            >>> Index(2).resolve(10)
            2
            >>> Index(2, from_end=True).resolve(10)
            8
            >>> Index(12, from_end=True).resolve(10)
            -2
        """
        return length - self.value if self.from_end else self.value

    def get_index(self, sequence: Sized) -> int:
        """
        Разрешение относительно конкретного контейнера.

        Работает для любого Sized: list, tuple, str, bytes, bytearray,
        memoryview, array.array и т.п.
        """
        return self.resolve(len(sequence))

    def __str__(self) -> str:
        return f"^{self.value}" if self.from_end else str(self.value)
