"""
Collection Helpers — Операции над словарями и последовательностями

Свободные функции поверх абстракций collections.abc:
- MutableMapping: try_insert, get_or_insert, merge_from, add_or_update
- MutableSequence: append_all
- Iterable: find_index, index_of

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Дубликат ключа — не ошибка: try_insert возвращает False, словарь не меняется
2. "Не найдено" — не ошибка: возвращается NOT_FOUND (-1)
3. Нарушение предусловия (None вместо source/функции) → PreconditionViolation
   ДО любой мутации контейнера
4. Потокобезопасность не гарантируется: синхронизация — на вызывающей стороне
"""

import logging
from collections.abc import Callable, Iterable, Mapping, MutableMapping, MutableSequence
from typing import Any, Final, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

# Sentinel результата поиска
NOT_FOUND: Final[int] = -1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PreconditionViolation(ValueError):
    """
    Нарушение предусловия вызова (например, source=None в merge_from).

    Возбуждается до любой мутации переданного контейнера.
    """

    pass


def _require(value: Any, name: str) -> None:
    if value is None:
        logger.debug("Precondition failed: %s is None", name)
        raise PreconditionViolation(f"{name} must not be None")


# =============================================================================
# MAPPING HELPERS
# =============================================================================


def try_insert(mapping: MutableMapping[K, V], key: K, value: V) -> bool:
    """
    Вставка значения, только если ключ отсутствует.

    Args:
        mapping: Словарь
        key: Ключ
        value: Значение

    Returns:
        True если значение вставлено, False если ключ уже существовал

    Examples:
        >>> d = {}
        >>> try_insert(d, "a", 1)
        True
        >>> try_insert(d, "a", 2)
        False
        >>> d
        {'a': 1}
    """
    if key in mapping:
        logger.debug("try_insert: key %r already present", key)
        return False

    mapping[key] = value
    return True


def get_or_insert(mapping: MutableMapping[K, V], key: K, value: V) -> V:
    """
    Получение значения по ключу; при отсутствии ключа вставляется value.

    Returns:
        Значение, хранящееся под key после вызова
    """
    try_insert(mapping, key, value)
    return mapping[key]


def get_or_insert_with(
    mapping: MutableMapping[K, V],
    key: K,
    supplier: Callable[[], V],
) -> V:
    """
    Ленивый вариант get_or_insert.

    supplier вызывается не более одного раза и только если ключ отсутствует.

    Args:
        mapping: Словарь
        key: Ключ
        supplier: Функция без аргументов, возвращающая значение

    Returns:
        Значение, хранящееся под key после вызова

    Raises:
        PreconditionViolation: Если supplier is None
    """
    _require(supplier, "supplier")

    if key not in mapping:
        mapping[key] = supplier()
    return mapping[key]


def merge_from(target: MutableMapping[K, V], source: Mapping[K, V] | None) -> None:
    """
    Перенос всех пар source в target (с перезаписью существующих ключей).

    Повторный вызов с тем же source идемпотентен.

    Args:
        target: Целевой словарь
        source: Исходный словарь (не None)

    Raises:
        PreconditionViolation: Если source is None (target не изменяется)

    Examples:
        >>> target = {"a": 0}
        >>> merge_from(target, {"a": 1, "b": 2})
        >>> target
        {'a': 1, 'b': 2}
    """
    _require(source, "source")

    for key, value in source.items():
        target[key] = value

    logger.debug("merge_from: merged %d entries", len(source))


def add_or_update(
    mapping: MutableMapping[K, V],
    key: K,
    value: V,
    update_fn: Callable[[K, V], V],
) -> V:
    """
    Добавление value или обновление существующего значения через update_fn.

    Args:
        mapping: Словарь
        key: Ключ
        value: Значение для вставки, если ключ отсутствует
        update_fn: (key, existing) -> new_value, если ключ присутствует

    Returns:
        Значение, хранящееся под key после вызова

    Raises:
        PreconditionViolation: Если update_fn is None
    """
    _require(update_fn, "update_fn")

    if key in mapping:
        mapping[key] = update_fn(key, mapping[key])
    else:
        mapping[key] = value
    return mapping[key]


def add_or_update_with(
    mapping: MutableMapping[K, V],
    key: K,
    add_fn: Callable[[K], V],
    update_fn: Callable[[K, V], V],
) -> V:
    """
    Добавление add_fn(key) или обновление через update_fn(key, existing).

    За один вызов выполняется ровно одна из функций.

    Args:
        mapping: Словарь
        key: Ключ
        add_fn: key -> value, если ключ отсутствует
        update_fn: (key, existing) -> new_value, если ключ присутствует

    Returns:
        Значение, хранящееся под key после вызова

    Raises:
        PreconditionViolation: Если add_fn или update_fn is None

    Examples:
        >>> counts = {"a": 1}
        >>> add_or_update_with(counts, "a", lambda k: 1, lambda k, v: v + 1)
        2
        >>> add_or_update_with(counts, "b", lambda k: 1, lambda k, v: v + 1)
        1
    """
    _require(add_fn, "add_fn")
    _require(update_fn, "update_fn")

    if key in mapping:
        mapping[key] = update_fn(key, mapping[key])
    else:
        mapping[key] = add_fn(key)
    return mapping[key]


# =============================================================================
# SEQUENCE HELPERS
# =============================================================================


def append_all(sequence: MutableSequence[T], items: Iterable[T]) -> None:
    """
    Добавление всех items в конец sequence с сохранением порядка.

    Длина sequence растёт ровно на число items, в том числе когда
    items — это сама sequence (extend копирует её до вставки).
    """
    sequence.extend(items)


def find_index(collection: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """
    Позиция первого элемента, для которого predicate истинен.

    Args:
        collection: Итерируемая коллекция (обход в порядке итерации)
        predicate: item -> bool

    Returns:
        Zero-based индекс первого совпадения или NOT_FOUND

    Raises:
        PreconditionViolation: Если predicate is None

    Examples:
        >>> find_index([5, 3, 9, 3], lambda x: x == 3)
        1
        >>> find_index([5, 3, 9], lambda x: x == 7)
        -1
    """
    _require(predicate, "predicate")

    for position, item in enumerate(collection):
        if predicate(item):
            return position
    return NOT_FOUND


def index_of(collection: Iterable[T], item: T) -> int:
    """
    Позиция первого элемента, равного item (по ==), или NOT_FOUND.

    Examples:
        >>> index_of([5, 3, 9, 3], 3)
        1
    """
    return find_index(collection, lambda x: item == x)
