"""
JSON Schema Contract Validators

Валидация JSON данных по формальным контрактам из contracts/schema/.
Использует библиотеку jsonschema (Draft 2020-12).

Схемы:
- game_report.json (JSON отчёт CLI: pool + games)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path | None = None):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = schema_dir or Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'game_report')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Базовый валидатор: данные против одной JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class GameReportValidator(ContractValidator):
    """Валидатор JSON отчёта генерации."""

    def __init__(self):
        super().__init__("game_report")

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Схема плюс семантика, которую JSON Schema не выражает:
        game_count == len(games), каждая игра — подмножество pool,
        длины select_size, по возрастанию.
        """
        super().validate(data)

        games = data["games"]
        pool = set(data["pool"])
        if data["game_count"] != len(games):
            raise jsonschema.ValidationError(
                f"game_count {data['game_count']} != number of games {len(games)}"
            )
        for i, game in enumerate(games):
            if len(game) != data["select_size"]:
                raise jsonschema.ValidationError(
                    f"game {i} has {len(game)} numbers, expected {data['select_size']}"
                )
            if list(game) != sorted(game):
                raise jsonschema.ValidationError(f"game {i} is not in ascending order: {game}")
            if not set(game) <= pool:
                raise jsonschema.ValidationError(f"game {i} uses numbers outside the pool: {game}")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_game_report(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если отчёт не соответствует контракту
    """
    GameReportValidator().validate(data)

