"""Render interface declarations from an InterfaceModel."""

import logging

from .code_builder import CodeBuilder
from .config import DEFAULT_OPTIONS, RenderOptions
from .model import (
    SEED_USING,
    EventInfo,
    GenericArg,
    InterfaceModel,
    MethodInfo,
    PropertyInfo,
    merge_usings,
)

logger = logging.getLogger(__name__)

AUTOGENERATED_HEADER = (
    "//--------------------------------------------------------------------------------------------------\n"
    "// <auto-generated>\n"
    "//     This code was generated by a tool.\n"
    "//\n"
    "//     Changes to this file may cause incorrect behavior and will be lost if the code is regenerated.\n"
    "// </auto-generated>\n"
    "//--------------------------------------------------------------------------------------------------\n"
    "\n"
)


def format_accessors(prop: PropertyInfo) -> str:
    """Format the accessor block of a property.

    Args:
        prop: PropertyInfo object

    Returns:
        ``{ get; set; }``, ``{ get; }``, ``{ set; }`` or ``{  }``
    """
    get = "get; " if prop.has_get else ""
    set_ = "set; " if prop.has_set else ""
    if not get and not set_:
        return "{  }"
    return f"{{ {get}{set_}}}"


def format_generic_args(args: tuple[GenericArg, ...]) -> str:
    if not args:
        return ""
    return f"<{', '.join(a.name for a in args)}>"


def format_constraints(args: tuple[GenericArg, ...]) -> str:
    """Join the non-blank ``where`` clauses in generic argument order.

    A generic method always gets the leading space, even when every
    constraint is blank.

    Args:
        args: Generic arguments of a method

    Returns:
        Constraint segment with a leading space, or empty string for a
        non-generic method
    """
    if not args:
        return ""
    constraints = [a.constraint for a in args if a.constraint.strip()]
    return f" {' '.join(constraints)}"


def _write_property(cb: CodeBuilder, prop: PropertyInfo) -> None:
    cb.append_reflowed(prop.documentation)
    cb.append_line(f"{prop.type_str} {prop.name} {format_accessors(prop)}")
    cb.append_line()


def _write_method(cb: CodeBuilder, method: MethodInfo) -> None:
    cb.append_reflowed(method.documentation)
    cb.append_indented_no_break(f"{method.return_type} {method.name}")
    cb.append_raw(format_generic_args(method.generic_args))
    cb.append_raw(f"({', '.join(method.parameters)})")
    cb.append_raw(format_constraints(method.generic_args))
    cb.append_raw(";")
    cb.append_line_break()
    cb.append_line()


def _write_event(cb: CodeBuilder, event: EventInfo) -> None:
    cb.append_reflowed(event.documentation)
    cb.append_line(f"event {event.type_str} {event.name};")
    cb.append_line()


def render_interface(model: InterfaceModel, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    """Render a complete interface declaration.

    Emission order is fixed: header, usings, namespace, class documentation,
    generated-code marker, interface head, then properties, methods and
    events in model order.

    Args:
        model: InterfaceModel to render
        options: Layout options

    Returns:
        Generated source text
    """
    logger.debug(
        "Rendering %s.%s (%d properties, %d methods, %d events)",
        model.namespace,
        model.interface_name,
        len(model.properties),
        len(model.methods),
        len(model.events),
    )

    cb = CodeBuilder(indent_width=options.indent_width, newline=options.newline)
    cb.append_raw(AUTOGENERATED_HEADER.replace("\n", options.newline))

    for usg in model.usings:
        cb.append_line(usg)
    cb.append_line()

    cb.append_line(f"namespace {model.namespace}")
    cb.append_line("{")
    cb.indent()

    cb.append_reflowed(model.documentation)
    cb.append_line(
        f'[GeneratedCode("{options.generator_name}", "{options.generator_version}")]'
    )
    cb.append_line(f"public partial interface {model.interface_name}{model.generic_suffix}")
    cb.append_line("{")
    cb.indent()

    for prop in model.properties:
        _write_property(cb, prop)
    for method in model.methods:
        _write_method(cb, method)
    for event in model.events:
        _write_event(cb, event)

    cb.dedent()
    cb.append_line("}")
    cb.dedent()
    cb.append_line("}")

    return cb.render()


class InterfaceBuilder:
    """Accumulates members of an interface and renders it.

    Mutation is additive only. ``build_model`` takes an immutable snapshot
    and ``render`` is pure with respect to that snapshot, so it may be
    called any number of times.
    """

    def __init__(
        self,
        namespace: str,
        interface_name: str,
        options: RenderOptions = DEFAULT_OPTIONS,
    ) -> None:
        self.namespace = namespace
        self.interface_name = interface_name
        self.options = options
        self._usings: tuple[str, ...] = (SEED_USING,)
        self._properties: list[PropertyInfo] = []
        self._methods: list[MethodInfo] = []
        self._events: list[EventInfo] = []
        self._documentation = ""
        self._generic_suffix = ""

    def set_generic_suffix(self, suffix: str) -> None:
        self._generic_suffix = suffix

    def set_class_documentation(self, documentation: str) -> None:
        self._documentation = documentation

    def add_usings(self, usings: list[str] | tuple[str, ...]) -> None:
        self._usings = merge_usings(self._usings, usings)

    def add_property(
        self,
        name: str,
        type_str: str,
        has_get: bool,
        has_set: bool,
        documentation: str = "",
    ) -> None:
        self._properties.append(PropertyInfo(name, type_str, has_get, has_set, documentation))

    def add_method(
        self,
        name: str,
        return_type: str,
        documentation: str = "",
        parameters: list[str] | tuple[str, ...] = (),
        generic_args: list[tuple[str, str]] | tuple[tuple[str, str], ...] = (),
    ) -> None:
        """Add a method.

        Args:
            name: Method name
            return_type: Return type text, ``void`` included
            documentation: Documentation comment block
            parameters: Pre-formatted parameter declarations, kept in order
            generic_args: ``(name, where_constraint_or_empty)`` pairs
        """
        self._methods.append(
            MethodInfo(
                name=name,
                return_type=return_type,
                documentation=documentation,
                parameters=tuple(parameters),
                generic_args=tuple(GenericArg(arg, constraint) for arg, constraint in generic_args),
            )
        )

    def add_event(self, name: str, type_str: str, documentation: str = "") -> None:
        self._events.append(EventInfo(name, type_str, documentation))

    def build_model(self) -> InterfaceModel:
        return InterfaceModel(
            interface_name=self.interface_name,
            namespace=self.namespace,
            usings=self._usings,
            properties=tuple(self._properties),
            methods=tuple(self._methods),
            events=tuple(self._events),
            documentation=self._documentation,
            generic_suffix=self._generic_suffix,
        )

    def render(self) -> str:
        return render_interface(self.build_model(), self.options)

    def __str__(self) -> str:
        return self.render()
