"""Declarative model of an interface to emit.

All type names, parameter declarations and constraints are opaque,
pre-formatted strings. Nothing here interprets them.
"""

import logging
from dataclasses import dataclass
from typing import Any

from .exceptions import ModelFormatError

logger = logging.getLogger(__name__)

SEED_USING = "using System.CodeDom.Compiler;"


@dataclass(frozen=True)
class PropertyInfo:
    """A property of the interface."""

    name: str
    type_str: str
    has_get: bool
    has_set: bool
    documentation: str = ""


@dataclass(frozen=True)
class GenericArg:
    """A method type parameter and its optional ``where`` clause."""

    name: str
    constraint: str = ""


@dataclass(frozen=True)
class MethodInfo:
    """A method of the interface.

    ``parameters`` keeps call order and is not deduplicated.
    """

    name: str
    return_type: str
    documentation: str = ""
    parameters: tuple[str, ...] = ()
    generic_args: tuple[GenericArg, ...] = ()


@dataclass(frozen=True)
class EventInfo:
    """An event of the interface."""

    name: str
    type_str: str
    documentation: str = ""


@dataclass(frozen=True)
class InterfaceModel:
    """Everything needed to render one interface declaration."""

    interface_name: str
    namespace: str
    usings: tuple[str, ...] = (SEED_USING,)
    properties: tuple[PropertyInfo, ...] = ()
    methods: tuple[MethodInfo, ...] = ()
    events: tuple[EventInfo, ...] = ()
    documentation: str = ""
    generic_suffix: str = ""


def merge_usings(existing: tuple[str, ...], new: list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Merge using directives keeping first-seen order and dropping repeats.

    Args:
        existing: Usings collected so far
        new: Usings to add

    Returns:
        Combined tuple with each directive once
    """
    return tuple(dict.fromkeys([*existing, *new]))


def _require_str(data: dict, key: str, context: str, default: str | None = None) -> str:
    value = data.get(key)
    if value is None:
        value = default
    if value is None:
        raise ModelFormatError(f"{context}: missing required key '{key}'")
    if not isinstance(value, str):
        raise ModelFormatError(
            f"{context}: '{key}' must be a string, got {type(value).__name__}"
        )
    return value


def _require_bool(data: dict, key: str, context: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ModelFormatError(
            f"{context}: '{key}' must be a boolean, got {type(value).__name__}"
        )
    return value


def _require_list(data: dict, key: str, context: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ModelFormatError(
            f"{context}: '{key}' must be a list, got {type(value).__name__}"
        )
    return value


def _require_dict(item: Any, context: str) -> dict:
    if not isinstance(item, dict):
        raise ModelFormatError(f"{context}: expected an object, got {type(item).__name__}")
    return item


def parse_generic_arg(raw: Any, context: str) -> GenericArg:
    """Parse a generic argument from ``[name, constraint]`` or an object.

    Args:
        raw: Two-element list, one-element list, or ``{"name", "constraint"}`` dict
        context: Location used in error messages

    Returns:
        GenericArg object
    """
    if isinstance(raw, list):
        if not 1 <= len(raw) <= 2 or not all(isinstance(p, str) for p in raw):
            raise ModelFormatError(
                f"{context}: generic argument must be [name] or [name, constraint]"
            )
        return GenericArg(*raw)

    raw = _require_dict(raw, context)
    return GenericArg(
        name=_require_str(raw, "name", context),
        constraint=_require_str(raw, "constraint", context, ""),
    )


def parse_property(raw: Any, index: int) -> PropertyInfo:
    """Parse a property entry.

    Args:
        raw: Property dictionary
        index: Position in the ``properties`` list

    Returns:
        PropertyInfo object
    """
    context = f"properties[{index}]"
    raw = _require_dict(raw, context)
    return PropertyInfo(
        name=_require_str(raw, "name", context),
        type_str=_require_str(raw, "type", context),
        has_get=_require_bool(raw, "get", context, True),
        has_set=_require_bool(raw, "set", context, False),
        documentation=_require_str(raw, "documentation", context, ""),
    )


def parse_method(raw: Any, index: int) -> MethodInfo:
    """Parse a method entry.

    Args:
        raw: Method dictionary
        index: Position in the ``methods`` list

    Returns:
        MethodInfo object
    """
    context = f"methods[{index}]"
    raw = _require_dict(raw, context)

    parameters = _require_list(raw, "parameters", context)
    for p in parameters:
        if not isinstance(p, str):
            raise ModelFormatError(f"{context}: parameters must be strings")

    generic_args = [
        parse_generic_arg(a, f"{context}.generic_args[{i}]")
        for i, a in enumerate(_require_list(raw, "generic_args", context))
    ]

    return MethodInfo(
        name=_require_str(raw, "name", context),
        return_type=_require_str(raw, "return_type", context, "void"),
        documentation=_require_str(raw, "documentation", context, ""),
        parameters=tuple(parameters),
        generic_args=tuple(generic_args),
    )


def parse_event(raw: Any, index: int) -> EventInfo:
    """Parse an event entry."""
    context = f"events[{index}]"
    raw = _require_dict(raw, context)
    return EventInfo(
        name=_require_str(raw, "name", context),
        type_str=_require_str(raw, "type", context),
        documentation=_require_str(raw, "documentation", context, ""),
    )


def parse_model(data: Any) -> InterfaceModel:
    """Parse a JSON model description into an InterfaceModel.

    Only the shape of the description is checked. Type names, parameters
    and constraints are taken as given.

    Args:
        data: Decoded JSON object

    Returns:
        InterfaceModel object

    Raises:
        ModelFormatError: If required keys are missing or have the wrong type
    """
    data = _require_dict(data, "model")

    usings = _require_list(data, "usings", "model")
    for u in usings:
        if not isinstance(u, str):
            raise ModelFormatError("model: usings must be strings")

    model = InterfaceModel(
        interface_name=_require_str(data, "name", "model"),
        namespace=_require_str(data, "namespace", "model"),
        usings=merge_usings((SEED_USING,), usings),
        properties=tuple(
            parse_property(p, i) for i, p in enumerate(_require_list(data, "properties", "model"))
        ),
        methods=tuple(
            parse_method(m, i) for i, m in enumerate(_require_list(data, "methods", "model"))
        ),
        events=tuple(
            parse_event(e, i) for i, e in enumerate(_require_list(data, "events", "model"))
        ),
        documentation=_require_str(data, "documentation", "model", ""),
        generic_suffix=_require_str(data, "generic_suffix", "model", ""),
    )
    logger.debug(
        "Parsed model %s.%s: %d properties, %d methods, %d events",
        model.namespace,
        model.interface_name,
        len(model.properties),
        len(model.methods),
        len(model.events),
    )
    return model
