"""
Plain-text report of a schema dictionary.

Used by the command line tool to show what the parser resolved: every
schema, every type path with a one-line description, and the nodes whose
shape could not be determined.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ..type_definitions import (
    AllOfType,
    AnyOfType,
    ArrayType,
    EnumType,
    ObjectType,
    OneOfType,
    PrimitiveType,
    SchemaDictionary,
    TupleType,
    TypeDefinition,
    TypeReference,
    UnionType,
)


def _join_paths(paths) -> str:
    return ", ".join(str(path) for path in paths)


def describe_type(type_def: TypeDefinition) -> str:
    """One-line description of a type definition."""
    match type_def:
        case TypeReference():
            target = f"{type_def.target_uri}{type_def.target_path}" if type_def.target_uri else str(type_def.target_path)
            return f"reference -> {target}"
        case PrimitiveType():
            return type_def.primitive_kind
        case EnumType():
            return f"enum<{type_def.primitive_kind}> {list(type_def.values)!r}"
        case ArrayType():
            return f"array of {type_def.item_path}" if type_def.item_path is not None else "array"
        case TupleType():
            return f"tuple ({_join_paths(type_def.item_paths)})"
        case ObjectType():
            fields = []
            for name in type_def.properties:
                fields.append(f"{name}{'' if name in type_def.required else '?'}")
            return f"object {{{', '.join(fields)}}}"
        case UnionType():
            return " | ".join(type_def.variants)
        case AllOfType() | AnyOfType() | OneOfType():
            return f"{type_def.kind.value} ({_join_paths(type_def.branch_paths)})"
    return type_def.kind.value


class ReportPrinter:
    """Renders a schema dictionary with a Jinja2 template."""

    TEMPLATE_NAME = "report.txt.jinja2"

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent / "templates"
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["describe_type"] = describe_type
        self.template = self.jinja_env.get_template(self.TEMPLATE_NAME)

    def render(self, schema_dict: SchemaDictionary) -> str:
        schemas = [schema_dict[schema_id] for schema_id in sorted(schema_dict)]
        return self.template.render(schemas=schemas)
