"""
Text Stream — Текстовый поток поверх key-value хранилища

Файлоподобная обёртка: путь — ключ, содержимое — строковое значение
в MutableMapping (по умолчанию — новый dict в памяти).

Строка режима проверяется по тем же правилам, что и у open():
- 1..3 символа из "rwax+tb" без повторов
- ровно один из r/w/a/x
- не более одного из t/b
"""

import logging
from collections.abc import MutableMapping
from typing import Final

from pydantic import BaseModel, Field

from strictbuiltins.core.errors import InvalidArgumentType, InvalidArgumentValue, Unsupported, type_name

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ACCESS_CHARS: Final[frozenset[str]] = frozenset("rwax")
UPDATE_CHARS: Final[frozenset[str]] = frozenset("+")
FORMAT_CHARS: Final[frozenset[str]] = frozenset("tb")
MODE_CHARS: Final[frozenset[str]] = ACCESS_CHARS | UPDATE_CHARS | FORMAT_CHARS

MAX_MODE_LENGTH: Final[int] = 3


# =============================================================================
# MODE MODEL
# =============================================================================


class OpenMode(BaseModel):
    """
    Разобранная строка режима.

    Immutable модель; создаётся через OpenMode.parse().
    """

    mode: str = Field(..., min_length=1, max_length=MAX_MODE_LENGTH, description="Исходная строка режима")
    access: str = Field(..., description="Один из r/w/a/x")
    readable: bool = Field(..., description="Поток доступен для чтения")
    writable: bool = Field(..., description="Поток доступен для записи")
    text: bool = Field(..., description="Текстовый режим (нет 'b')")

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, mode: str) -> "OpenMode":
        """
        Разбор и валидация строки режима.

        Args:
            mode: Строка режима, например "r", "w+", "rb"

        Returns:
            OpenMode

        Raises:
            InvalidArgumentValue: Невалидная строка режима
        """
        chars = set(mode)

        if not 1 <= len(mode) <= MAX_MODE_LENGTH or len(chars) != len(mode):
            raise InvalidArgumentValue(f"Invalid mode: '{mode}'")

        if not chars <= MODE_CHARS:
            raise InvalidArgumentValue(f"Invalid mode: '{mode}'")

        if len(chars & FORMAT_CHARS) > 1:
            raise InvalidArgumentValue("can't have text and binary mode at once")

        access = chars & ACCESS_CHARS
        if len(access) > 1:
            raise InvalidArgumentValue("Must have exactly one of create/read/write/append mode")

        if not access:
            raise InvalidArgumentValue(
                "Must have exactly one of create/read/write/append mode and at most one plus"
            )

        update = bool(chars & UPDATE_CHARS)
        (access_char,) = access

        return cls(
            mode=mode,
            access=access_char,
            readable=access_char == "r" or update,
            writable=access_char != "r" or update,
            text="b" not in chars,
        )


# =============================================================================
# STREAM
# =============================================================================


class TextIOWrapper:
    """
    Текстовый поток поверх key-value хранилища.

    Запись в режиме "a" дописывает к существующему содержимому,
    в остальных режимах заменяет его.
    """

    def __init__(
        self,
        path: str,
        mode: str,
        store: MutableMapping[str, str] | None = None,
    ):
        self._mode = OpenMode.parse(mode)
        self.path = path
        self._store: MutableMapping[str, str] = {} if store is None else store

    @property
    def mode(self) -> str:
        return self._mode.mode

    @property
    def readable(self) -> bool:
        return self._mode.readable

    @property
    def writable(self) -> bool:
        return self._mode.writable

    @property
    def text(self) -> bool:
        return self._mode.text

    def read(self) -> str | None:
        """
        Содержимое по пути.

        Returns:
            Строка или None, если по пути ничего не записано

        Raises:
            Unsupported: Поток не доступен для чтения
        """
        if not self.readable:
            raise Unsupported("not readable")
        return self._store.get(self.path)

    def write(self, *args: object) -> int:
        """
        Запись текста по пути.

        Returns:
            Количество записанных символов

        Raises:
            Unsupported: Поток не доступен для записи
            InvalidArgumentType: Аргументов не один или аргумент не строка
        """
        if not self.writable:
            raise Unsupported("not writable")

        if len(args) != 1:
            raise InvalidArgumentType(f"write() takes exactly one argument ({len(args)} given)")

        data = args[0]
        if not isinstance(data, str):
            raise InvalidArgumentType(f"write() argument must be str, not '{type_name(data)}'")

        if self._mode.access == "a":
            self._store[self.path] = self._store.get(self.path, "") + data
        else:
            self._store[self.path] = data

        logger.debug(
            "Wrote %d characters to %s",
            len(data),
            self.path,
            extra={"path": self.path, "mode": self.mode},
        )
        return len(data)


def open_(
    path: str,
    mode: str = "r",
    store: MutableMapping[str, str] | None = None,
) -> TextIOWrapper:
    """Открыть текстовый поток по пути в хранилище"""
    return TextIOWrapper(path, mode, store)
