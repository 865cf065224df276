"""
Schema entries for the database registry.
Validates the declarative schema list and loads it from JSON files.
"""
import json
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import BaseModel

from .exceptions import InvalidSchemaError
from ...core.config import DB_SCHEMA_FILE
from ...core.logging_config import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("type", "name", "key")


class SchemaEntry(BaseModel):
    """
    One database declaration: backend type, physical name and lookup key.

    A typed container only. validate_schema() performs every check, in
    order and with its own messages, before an entry is built.
    """
    type: str
    name: str
    key: str
    tables: Optional[Any] = None
    indexes: Optional[Any] = None


def validate_schema(dbschema: Any) -> List[SchemaEntry]:
    """
    Validate a schema list and parse its entries.

    Args:
        dbschema: List of mappings with type, name and key (tables/indexes optional)

    Returns:
        Parsed entries, in list order

    Raises:
        InvalidSchemaError: schema missing, not a list, an entry lacks a
            required field, or a key is repeated
    """
    if dbschema is None:
        raise InvalidSchemaError("database schema is missing")

    if not isinstance(dbschema, list):
        raise InvalidSchemaError("invalid database schema, schema must be an array")

    entries: List[SchemaEntry] = []
    keys = set()

    for item in dbschema:
        if not isinstance(item, dict):
            item = {}

        for field in REQUIRED_FIELDS:
            value = item.get(field)
            if not value:
                raise InvalidSchemaError(f"invalid database schema item, {field} is required")
            if not isinstance(value, str):
                raise InvalidSchemaError(f"invalid database schema item, {field} must be a string")

        key = item["key"]
        if key in keys:
            raise InvalidSchemaError("invalid database schema item, key must be unique")
        keys.add(key)

        entries.append(SchemaEntry(
            type=item["type"],
            name=item["name"],
            key=key,
            tables=item.get("tables"),
            indexes=item.get("indexes"),
        ))

    return entries


def load_schema(path: Optional[Union[str, Path]] = None) -> Any:
    """
    Read a schema list from a JSON file.

    The parsed value is returned as-is; validation happens in the registry.

    Args:
        path: JSON file path (defaults to DB_SCHEMA_FILE)

    Returns:
        Parsed JSON value
    """
    if path is None:
        path = DB_SCHEMA_FILE
    if not path:
        raise InvalidSchemaError("database schema is missing")

    schema_path = Path(path)
    logger.debug(f"Loading database schema from {schema_path}")
    with open(schema_path, 'r', encoding='utf-8') as f:
        return json.load(f)
