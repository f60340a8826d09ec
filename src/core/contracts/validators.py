"""
Order Spec Contract — JSON Schema проверка декларативных ordering

Сырые документы (JSON/YAML конфигурация, тело HTTP-запроса и т.п.)
проверяются контрактом до построения OrderSpec. Ошибки сообщаются
с JSON-путём до отказавшего поля: `$.keys[1].nulls`.

Схемы лежат в каталоге schema/ рядом с модулем (package data) и
проходят meta-validation (Draft 2020-12) при первой загрузке.
"""

import functools
import json
from pathlib import Path
from typing import Any, Final, Iterable, Iterator, Mapping, Optional

from jsonschema import Draft202012Validator, SchemaError, ValidationError
from jsonschema.exceptions import best_match

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"
SCHEMA_SUFFIX: Final[str] = ".json"
ORDER_SPEC_SCHEMA: Final[str] = "order_spec"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Кэширующий загрузчик схем из одного каталога.

    Args:
        schema_dir: Каталог со схемами (default: schema/ пакета)

    Raises:
        RuntimeError: Если каталог не существует
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: dict[str, dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available(self) -> list[str]:
        """Имена схем в каталоге (без расширения)"""
        return sorted(path.stem for path in self._schema_dir.glob(f"*{SCHEMA_SUFFIX}"))

    def load_schema(self, name: str) -> dict[str, Any]:
        """
        Схема по имени; повторные вызовы возвращают тот же объект.

        Raises:
            FileNotFoundError: Если схемы нет в каталоге
            json.JSONDecodeError: Если файл не является JSON
            ValueError: Если документ не является валидной JSON Schema
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{name}{SCHEMA_SUFFIX}"
        try:
            schema = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise FileNotFoundError(f"Schema {name!r} not found in {self._schema_dir}") from None

        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as exc:
            raise ValueError(f"{path.name} is not a valid JSON Schema: {exc.message}") from exc

        self._cache[name] = schema
        return schema


@functools.lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Загрузчик схем пакета (создаётся один раз)"""
    return SchemaLoader()


# =============================================================================
# ERROR FORMATTING
# =============================================================================


def format_error_path(path: Iterable[Any]) -> str:
    """
    JSON-путь до элемента документа.

    Examples:
        >>> format_error_path(["keys", 1, "nulls"])
        '$.keys[1].nulls'
        >>> format_error_path([])
        '$'
    """
    parts = ["$"]
    for step in path:
        parts.append(f"[{step}]" if isinstance(step, int) else f".{step}")
    return "".join(parts)


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка документов против одной схемы.

    Attributes:
        schema_name: Имя схемы
        schema: Загруженная схема
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Mapping[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def describe_errors(self, data: Mapping[str, Any]) -> list[str]:
        """
        Все нарушения контракта как строки `<json path>: <message>`.

        Отсортированы по пути; пустой список для валидного документа.
        """
        errors = sorted(self.iter_errors(data), key=lambda error: list(map(str, error.absolute_path)))
        return [f"{format_error_path(error.absolute_path)}: {error.message}" for error in errors]

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение контракта
        """
        error = best_match(self.iter_errors(data))
        if error is not None:
            raise error


class OrderSpecValidator(ContractValidator):
    """Валидатор контракта order_spec"""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(ORDER_SPEC_SCHEMA, loader)


@functools.lru_cache(maxsize=None)
def _order_spec_validator() -> OrderSpecValidator:
    return OrderSpecValidator()


def validate_order_spec(data: Mapping[str, Any]) -> None:
    """
    Проверка сырого order_spec документа.

    Raises:
        ValidationError: Если документ нарушает контракт
    """
    _order_spec_validator().validate(data)
