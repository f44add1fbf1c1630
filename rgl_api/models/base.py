"""Shared base for RGL API records."""

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator

T = TypeVar("T")


def _null_to_empty_list(v: Any) -> Any:
    return [] if v is None else v


def _null_to_empty_str(v: Any) -> Any:
    return "" if v is None else v


# RGL sends `null` for some empty collections and for "no end date yet".
NullableList = Annotated[list[T], BeforeValidator(_null_to_empty_list)]
IntList = NullableList[int]
StrList = NullableList[str]
EmptyableStr = Annotated[str, BeforeValidator(_null_to_empty_str)]


class RGLModel(BaseModel):
    """
    Immutable record decoded from an RGL response.

    Python attributes are snake_case; the API's camelCase names are aliases,
    so ``model_dump(by_alias=True)`` reproduces the wire shape. Every field
    has a default, which makes ``Model()`` the zero record.
    """

    class Config:
        """Pydantic configuration."""

        frozen = True
        populate_by_name = True
        extra = "ignore"
