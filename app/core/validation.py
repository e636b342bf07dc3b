"""
Input validation built from plain rule functions.

A rule is a callable ``rule(value, db)`` returning a ``FieldError`` when the
value breaks it and ``None`` otherwise. Rules that need the database
(uniqueness and existence predicates) query it through the session they are
handed, so the same rule list works against any session.

Entity modules declare their payload as a list of ``Field`` objects and run
them through ``validate``. The errors come back as a list; ``raise_for_errors``
turns the first one into the API error returned to the client.
"""
import math
import re
from dataclasses import dataclass, field as dataclass_field
from datetime import datetime
from typing import Any, Callable, List, Optional
from fastapi import status
from sqlalchemy.orm import Session
from app.core.errors import BadRequestError, NotFoundError
from app.core.utils import parse_datetime, parse_id


@dataclass
class FieldError:
    field: str
    message: str
    status_code: int = status.HTTP_400_BAD_REQUEST

    @property
    def is_not_found(self) -> bool:
        return self.status_code == status.HTTP_404_NOT_FOUND


Rule = Callable[[Any, Session], Optional[FieldError]]


@dataclass
class Field:
    name: str
    rules: List[Rule] = dataclass_field(default_factory=list)
    required: Optional[str] = None
    column: Optional[str] = None
    parse: Optional[Callable[[Any], Any]] = None

    @property
    def target(self) -> str:
        return self.column or self.name


def validate(db: Session, data: dict, fields: List[Field]) -> List[FieldError]:
    """Check every declared field in order and return all the violations found."""
    errors = []
    for declared in fields:
        value = data.get(declared.name)
        if value is None:
            if declared.required:
                errors.append(FieldError(declared.name, declared.required))
            continue

        for rule in declared.rules:
            error = rule(value, db)
            if error is not None:
                error.field = declared.name
                errors.append(error)
                break
    return errors


def raise_for_errors(errors: List[FieldError]):
    """Raise the API error matching the first violation, if there is one."""
    if not errors:
        return
    first = errors[0]
    if first.is_not_found:
        raise NotFoundError(first.message)
    raise BadRequestError(first.message)


def optional(fields: List[Field]) -> List[Field]:
    """Same fields with the required messages dropped (used by update payloads)."""
    return [
        Field(declared.name, declared.rules, None, declared.column, declared.parse)
        for declared in fields
    ]


def collect_values(fields: List[Field], data: dict) -> dict:
    """Map the validated payload onto column names, parsing values where needed."""
    values = {}
    for declared in fields:
        if data.get(declared.name) is None:
            continue
        value = data[declared.name]
        values[declared.target] = declared.parse(value) if declared.parse else value
    return values


# Type rules

def is_string(message: str) -> Rule:
    def rule(value, db):
        if not isinstance(value, str):
            return FieldError("", message)
    return rule


def is_number(message: str) -> Rule:
    def rule(value, db):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return FieldError("", message)
        # 1e999 decodes to inf
        if not math.isfinite(value):
            return FieldError("", message)
    return rule


def is_integer(message: str) -> Rule:
    def rule(value, db):
        if isinstance(value, bool):
            return FieldError("", message)
        if isinstance(value, float) and value.is_integer():
            return None
        if not isinstance(value, int):
            return FieldError("", message)
    return rule


def is_boolean(message: str) -> Rule:
    def rule(value, db):
        if not isinstance(value, bool):
            return FieldError("", message)
    return rule


def is_id(message: str) -> Rule:
    """
    Ids may arrive as numbers (body) or numeric strings (path). Values of
    the right type that can't name a row are left to the existence check.
    """
    def rule(value, db):
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            return FieldError("", message)
    return rule


def is_datetime(message: str) -> Rule:
    def rule(value, db):
        try:
            parse_datetime(value)
        except ValueError:
            return FieldError("", message)
    return rule


# Bound rules

def min_length(limit: int, message: str) -> Rule:
    def rule(value, db):
        if len(value) < limit:
            return FieldError("", message)
    return rule


def max_length(limit: int, message: str) -> Rule:
    def rule(value, db):
        if len(value) > limit:
            return FieldError("", message)
    return rule


def exact_length(length: int, message: str) -> Rule:
    def rule(value, db):
        if len(value) != length:
            return FieldError("", message)
    return rule


def matches(pattern: str, message: str) -> Rule:
    compiled = re.compile(pattern)

    def rule(value, db):
        if not compiled.match(value):
            return FieldError("", message)
    return rule


def minimum(limit, message: str) -> Rule:
    def rule(value, db):
        if value < limit:
            return FieldError("", message)
    return rule


def maximum(limit, message: str) -> Rule:
    def rule(value, db):
        if value > limit:
            return FieldError("", message)
    return rule


def one_of(choices, message: str) -> Rule:
    def rule(value, db):
        if value not in choices:
            return FieldError("", message)
    return rule


def not_before(limit: datetime, message: str) -> Rule:
    def rule(value, db):
        if parse_datetime(value) < limit:
            return FieldError("", message)
    return rule


def not_after(limit: Callable[[], datetime], message: str) -> Rule:
    """``limit`` is called on every check so moving bounds such as "now" stay current."""
    def rule(value, db):
        if parse_datetime(value) > limit():
            return FieldError("", message)
    return rule


# Data store predicates

def is_available(column, message: str, exclude_id=None) -> Rule:
    """Uniqueness predicate: fails when another row already holds the value."""
    model = column.class_

    def rule(value, db):
        query = db.query(model.id).filter(column == value)
        if exclude_id is not None:
            query = query.filter(model.id != exclude_id)
        if query.first() is not None:
            return FieldError("", message)
    return rule


def exists(model, message: str, **filters) -> Rule:
    """Existence predicate: fails (as not found) when no row has the given id."""
    def rule(value, db):
        record_id = parse_id(value)
        found = None
        if record_id is not None:
            conditions = [getattr(model, name) == expected for name, expected in filters.items()]
            found = db.query(model.id).filter(model.id == record_id, *conditions).first()
        if found is None:
            return FieldError("", message, status.HTTP_404_NOT_FOUND)
    return rule


def exists_by(column, message: str) -> Rule:
    """Existence predicate on an arbitrary column (e.g. a user's email)."""
    model = column.class_

    def rule(value, db):
        if db.query(model.id).filter(column == value).first() is None:
            return FieldError("", message, status.HTTP_404_NOT_FOUND)
    return rule


def id_field(model, not_found: str, type_message: str, required: str, name: str = "id") -> Field:
    """Identifier check shared by the get, update and delete validators."""
    return Field(name, [is_id(type_message), exists(model, not_found)], required=required)


class EntityValidator:
    """
    The create, update and get/delete validators of one entity.

    ``fields`` builds the payload field list; it receives the id of the row
    being updated (or None) so uniqueness checks can skip that row.
    """

    def __init__(self, identifier: Field, fields: Callable[..., List[Field]]):
        self.identifier = identifier
        self.fields = fields

    def validate_id(self, db: Session, record_id) -> List[FieldError]:
        return validate(db, {self.identifier.name: record_id}, [self.identifier])

    def validate_create(self, db: Session, data: dict) -> List[FieldError]:
        return validate(db, data, self.fields())

    def validate_update(self, db: Session, record_id, data: dict) -> List[FieldError]:
        errors = self.validate_id(db, record_id)
        if errors:
            return errors
        return validate(db, data, optional(self.fields(parse_id(record_id))))


def reference(name: str, column: str, model, type_message: str, not_found: str, required: Optional[str] = None) -> Field:
    """A foreign key field: an id that must point at an existing row."""
    return Field(
        name,
        [is_id(type_message), exists(model, not_found)],
        required=required,
        column=column,
        parse=parse_id,
    )
