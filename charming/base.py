"""Shared base for every record of the chart document.

Fields are stored under snake_case names with a trailing underscore
(``name_``); the bare name is taken by a generated fluent setter, so that

    Title().text("Sales").left("center")

reads like the option tree it builds. On the wire the underscore is stripped
and the name is camel-cased (``item_style_`` -> ``itemStyle``).
"""

from typing import Annotated, Any, Callable, Dict, List, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    WrapSerializer,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from .errors import BorrowError

T = TypeVar("T")


def wire_alias(field_name: str) -> str:
    return to_camel(field_name.rstrip("_"))


class Repeated:
    """Marks a list field whose setter appends instead of replacing."""

    def __repr__(self) -> str:
        return "Repeated()"


def _as_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _prefer_one(value: List[Any], handler: SerializerFunctionWrapHandler) -> Any:
    out = handler(value)
    return out[0] if len(out) == 1 else out


# One item is written bare, several as an array; both shapes decode.
OneOrMany = Annotated[List[T], BeforeValidator(_as_list), WrapSerializer(_prefer_one)]


def _check_not_borrowed(record: Any, method: str) -> None:
    # Controllers write through setattr, so only direct fluent calls land here.
    if getattr(record, "_borrowed", False):
        raise BorrowError(f"{type(record).__name__}.{method}() called while a controller holds the record")


def _setter(field_name: str) -> Callable[..., Any]:
    def setter(self: Any, value: Any) -> Any:
        _check_not_borrowed(self, field_name.rstrip("_"))
        setattr(self, field_name, value)
        return self

    return setter


def _appender(field_name: str) -> Callable[..., Any]:
    def appender(self: Any, item: Any) -> Any:
        _check_not_borrowed(self, field_name.rstrip("_"))
        current = list(getattr(self, field_name))
        if isinstance(item, (list, tuple)):
            current.extend(item)
        else:
            current.append(item)
        setattr(self, field_name, current)
        return self

    return appender


def _resetter(field_name: str) -> Callable[..., Any]:
    def resetter(self: Any) -> Any:
        _check_not_borrowed(self, f"reset_{field_name.rstrip('_')}")
        setattr(self, field_name, [])
        return self

    return resetter


class EChartsModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=wire_alias,
        populate_by_name=True,
        validate_assignment=True,
    )

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        for field_name, info in cls.model_fields.items():
            if not field_name.endswith("_") or info.frozen:
                continue
            public = field_name.rstrip("_")
            if public in cls.__dict__:
                continue
            if hasattr(BaseModel, public):
                raise TypeError(f"{cls.__name__}.{field_name}: setter '{public}' would shadow a BaseModel attribute")

            if any(isinstance(meta, Repeated) for meta in info.metadata):
                method = _appender(field_name)
                method.__doc__ = f"Append to ``{info.alias or field_name}``."
                reset = _resetter(field_name)
                reset.__name__ = reset.__qualname__ = f"reset_{public}"
                reset.__doc__ = f"Empty ``{info.alias or field_name}``."
                setattr(cls, reset.__name__, reset)
            else:
                method = _setter(field_name)
                method.__doc__ = f"Set ``{info.alias or field_name}``."
            method.__name__ = public
            method.__qualname__ = f"{cls.__name__}.{public}"
            setattr(cls, public, method)

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Dict[str, Any]:
        # Unset means None, or [] in a field that defaults to []. An explicit []
        # in an Optional field is a value and stays.
        data = handler(self)
        for name, field in type(self).model_fields.items():
            key = (field.alias or name) if info.by_alias else name
            if key not in data:
                continue
            value = getattr(self, name)
            if value is None or (value == [] and field.default == []):
                del data[key]
        return data
