from typing import Iterable, List, Type
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiSchema(BaseModel):
    """Response schema base: built from ORM rows, dumped with camelCase keys."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


def serialize(schema: Type[ApiSchema], record) -> dict:
    return schema.model_validate(record).model_dump(by_alias=True, mode="json")


def serialize_all(schema: Type[ApiSchema], records: Iterable) -> List[dict]:
    return [serialize(schema, record) for record in records]
