"""
Preconditions — Guard-функции и таксономия нарушений

Модуль обеспечивает единообразную проверку входных данных всех числовых типов:
- Проверка обязательных аргументов (None запрещён)
- Проверка доменных ограничений аргументов (например, знаменатель != 0)
- Проверка состояния получателя операции (например, invert() от нуля)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нарушения обнаруживаются немедленно, в точке вызова
2. Нарушения не логируются, не подавляются и не повторяются внутри библиотеки
3. Неудачная операция не создаёт результата (все типы immutable)
"""

from typing import Any, TypeVar

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ReciprocalViolation(Exception):
    """
    Базовый класс всех нарушений предусловий.

    Позволяет перехватывать любое нарушение одним except-блоком.
    """

    pass


class NullArgumentViolation(ReciprocalViolation, TypeError):
    """
    Обязательный аргумент отсутствует (None).

    Сообщение содержит только имя аргумента, например "summand".
    """

    pass


class InvalidArgumentViolation(ReciprocalViolation, ValueError):
    """
    Аргумент нарушает доменное ограничение.

    Примеры:
    - Знаменатель дроби равен 0
    - Делитель не обратим
    - Компонента 64-bit типа вне диапазона [-2**63, 2**63 - 1]
    """

    pass


class InvalidStateViolation(ReciprocalViolation, RuntimeError):
    """
    Получатель операции (self) нарушает требуемое свойство.

    Примеры:
    - invert() от нуля
    - argument() / to_polar_form() от нуля
    - pow() с отрицательной степенью от необратимой дроби
    """

    pass


# =============================================================================
# GUARD-ФУНКЦИИ
# =============================================================================


def require_non_null(value: T | None, name: str) -> T:
    """
    Проверка, что обязательный аргумент передан.

    Args:
        value: Проверяемое значение
        name: Имя параметра (становится сообщением об ошибке)

    Returns:
        value без изменений

    Raises:
        NullArgumentViolation: Если value is None

    Examples:
        >>> require_non_null(1, "summand")
        1
        >>> require_non_null(None, "summand")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NullArgumentViolation: summand
    """
    if value is None:
        raise NullArgumentViolation(name)
    return value


def check_argument(condition: bool, template: str, *args: Any) -> None:
    """
    Проверка доменного ограничения аргумента.

    Сообщение форматируется лениво: template % args вычисляется
    только при нарушении.

    Args:
        condition: Условие, которое должно выполняться
        template: Шаблон сообщения в стиле %-форматирования
        *args: Аргументы шаблона

    Raises:
        InvalidArgumentViolation: Если condition ложно
    """
    if not condition:
        raise InvalidArgumentViolation(template % args if args else template)


def check_state(condition: bool, template: str, *args: Any) -> None:
    """
    Проверка состояния получателя операции.

    Args:
        condition: Условие, которое должно выполняться
        template: Шаблон сообщения в стиле %-форматирования
        *args: Аргументы шаблона

    Raises:
        InvalidStateViolation: Если condition ложно
    """
    if not condition:
        raise InvalidStateViolation(template % args if args else template)
