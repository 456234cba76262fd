"""
Record operations: service layer.
Validates form values against the entity schema, builds immutable records and
applies create/update/delete to the store. Every call returns an ActionResult.
"""

import logging
from dataclasses import fields as dataclass_fields, MISSING

from config.constants import MESSAGES
from core.errors import (
    ActionResult, DuplicateIdError, RecordError, RecordNotFoundError,
    RecordValidationError,
)
from core.schema import EntitySchema, get_schema

logger = logging.getLogger("DeviceCare")


def is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def parse_number(value):
    """
    Parse a form value as a number. Integral values come back as int.
    Raises ValueError for anything that is not numeric.
    """
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().replace(",", "")
        number = float(text)
    if number != number or number in (float("inf"), float("-inf")):
        raise ValueError(f"not a finite number: {value!r}")
    return int(number) if number.is_integer() else number


def validate_values(schema: EntitySchema, values: dict) -> dict:
    """
    Check required fields and coerce number fields.
    Returns the cleaned values; raises RecordValidationError on the first problem.
    """
    missing = [name for name in schema.required_fields if is_blank(values.get(name))]
    if missing:
        raise RecordValidationError(
            MESSAGES["required"].format(label=schema.label),
            schema.entity, values.get("id"), fields=missing,
        )

    cleaned = dict(values)
    for name in schema.number_fields:
        raw = values.get(name)
        if is_blank(raw):
            cleaned[name] = 0
            continue
        try:
            cleaned[name] = parse_number(raw)
        except (TypeError, ValueError):
            spec = schema.get_field(name)
            raise RecordValidationError(
                MESSAGES["not_numeric"].format(field=spec.label if spec else name),
                schema.entity, values.get("id"), fields=[name],
            ) from None

    for name, value in cleaned.items():
        if isinstance(value, str):
            cleaned[name] = value.strip()
    return cleaned


def build_record(schema: EntitySchema, values: dict):
    """Instantiate the schema's record type; absent optional fields fall back to ''/0."""
    cleaned = validate_values(schema, values)
    if schema.derive:
        cleaned.update(schema.derive(cleaned))

    kwargs = {}
    for f in dataclass_fields(schema.record_type):
        if f.name in cleaned and cleaned[f.name] is not None:
            kwargs[f.name] = cleaned[f.name]
        elif f.default is MISSING and f.default_factory is MISSING:
            kwargs[f.name] = 0 if f.type in (int, float, "int", "float") else ""
    return schema.record_type(**kwargs)


# ============================================
# CRUD
# ============================================
def create_record(store, entity: str, values: dict) -> ActionResult:
    """Validate and insert a new record; duplicate ids are rejected before mutating."""
    schema = get_schema(entity)
    try:
        record = build_record(schema, values)
        repo = store.repo(entity)
        if repo.exists(record.id):
            raise DuplicateIdError(MESSAGES["duplicate"].format(label=schema.label), entity, record.id)
        repo.create(record)
    except RecordError as e:
        return ActionResult(False, e.message, {"fields": getattr(e, "fields", [])})

    logger.info(f"Record created | ENTITY={entity} | ID={record.id}")
    return ActionResult(True, MESSAGES["created"].format(label=schema.label), record)


def update_record(store, entity: str, record_id: str, values: dict) -> ActionResult:
    """Replace an existing record by id. The id itself is not editable."""
    schema = get_schema(entity)
    try:
        repo = store.repo(entity)
        if not repo.exists(record_id):
            raise RecordNotFoundError(
                MESSAGES["not_found"].format(label=schema.label, record_id=record_id), entity, record_id
            )
        record = build_record(schema, {**values, "id": record_id})
        repo.update(record)
    except RecordError as e:
        return ActionResult(False, e.message, {"fields": getattr(e, "fields", [])})

    logger.info(f"Record updated | ENTITY={entity} | ID={record_id}")
    return ActionResult(True, MESSAGES["updated"].format(label=schema.label), record)


def delete_record(store, entity: str, record_id: str) -> ActionResult:
    """Filter the record out; dependents keep their now-dangling references."""
    schema = get_schema(entity)
    if not store.repo(entity).delete(record_id):
        return ActionResult(False, MESSAGES["not_found"].format(label=schema.label, record_id=record_id))

    logger.info(f"Record deleted | ENTITY={entity} | ID={record_id}")
    return ActionResult(True, MESSAGES["deleted"].format(label=schema.label), record_id)


def record_to_values(record) -> dict:
    """Flat field values of a record (nested full-view fields dropped) for prefilling a form."""
    schema_type = type(record)
    # Full views subclass the flat record; walk back to the flat type
    for base in schema_type.__mro__:
        if base.__name__.startswith("Full"):
            continue
        if hasattr(base, "__dataclass_fields__"):
            return {f.name: getattr(record, f.name) for f in dataclass_fields(base)}
    return dict(record.__dict__)
