# chequetrack/utils/json_codec.py
"""
Conversion between entity dataclasses and the camelCase JSON records kept in local
storage and exchanged with the sync endpoint.
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from dataclasses import fields, is_dataclass, MISSING
from typing import Type, List, Dict, Any, Union, get_type_hints

from chequetrack.utils import date_converter

logger = logging.getLogger(__name__)


def to_camel(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.capitalize() for part in rest)


def _unwrap_optional(field_type: Any) -> Any:
    if getattr(field_type, '__origin__', None) is Union:
        possible_types = [arg for arg in getattr(field_type, '__args__', []) if arg is not type(None)]
        if possible_types:
            return possible_types[0]
    return field_type


def value_to_json(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        # JSON numbers on disk, same as the remote sheet
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, datetime):
        return date_converter.to_iso_timestamp(value)
    if isinstance(value, date):
        return value.isoformat()
    if is_dataclass(value):
        return dataclass_to_json(value)
    if isinstance(value, (list, tuple)):
        return [value_to_json(item) for item in value]
    return value


def dataclass_to_json(obj: Any) -> Dict[str, Any]:
    """Serializes a dataclass into a dict with camelCase keys. None-valued optional fields are omitted."""
    data: Dict[str, Any] = {}
    for f in fields(obj):
        if not f.init:
            continue
        value = getattr(obj, f.name)
        if value is None:
            continue
        data[to_camel(f.name)] = value_to_json(value)
    return data


def value_from_json(field_type: Any, value: Any) -> Any:
    actual_type = _unwrap_optional(field_type)
    origin = getattr(actual_type, '__origin__', None)

    if origin in (list, List):
        item_type = getattr(actual_type, '__args__', [Any])[0]
        if not isinstance(value, list):
            raise ValueError(f"expected a list, got {type(value).__name__}")
        return [value_from_json(item_type, item) for item in value]
    if isinstance(actual_type, type) and is_dataclass(actual_type):
        if not isinstance(value, dict):
            raise ValueError(f"expected an object for {actual_type.__name__}")
        return dataclass_from_json(actual_type, value)
    if isinstance(actual_type, type) and issubclass(actual_type, Enum):
        return actual_type(value)
    if actual_type == Decimal:
        try:
            return Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"invalid decimal '{value}'") from e
    if actual_type == datetime:
        return date_converter.parse_timestamp(value)
    if actual_type == date:
        return date_converter.parse_date(value)
    if actual_type == bool:
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)
    if actual_type == int:
        return int(value)
    if actual_type == str and not isinstance(value, str):
        return str(value)
    return value


def dataclass_from_json(model_type: Type[Any], data: Dict[str, Any]) -> Any:
    """
    Builds a dataclass from a camelCase dict. Unknown keys are ignored, missing optional
    fields take their defaults, missing required fields raise ValueError.
    """
    hints = get_type_hints(model_type)
    entity_data = {}
    for f in fields(model_type):
        if not f.init:
            continue
        is_required = f.default is MISSING and f.default_factory is MISSING
        raw = data.get(to_camel(f.name))
        # spreadsheet rows come back with "" for empty optional cells
        blank_optional = raw == "" and not is_required and hints[f.name] is not str
        if raw is None or blank_optional:
            if is_required:
                raise ValueError(f"Missing required field '{to_camel(f.name)}' for {model_type.__name__}: {data}")
            continue
        try:
            entity_data[f.name] = value_from_json(hints[f.name], raw)
        except (ValueError, TypeError) as e:
            if is_required:
                raise ValueError(f"Invalid value for required field '{to_camel(f.name)}' of {model_type.__name__}: {raw!r}") from e
            logger.warning(f"Type conversion failed for field '{f.name}' with value '{raw}'. Using default. Error: {e}")
    return model_type(**entity_data)

