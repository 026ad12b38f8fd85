"""
Recursive walker over schema nodes.

The walker resolves a node's identifier and canonical path, picks an
interpreter from the dispatch table and lets the interpreter call back into
the walker for every nested child. The result is a flat type dictionary
holding the node and all of its descendants.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..config import ParserConfig
from ..errors import PathCollisionError, RecursionDepthError, SchemaCycleError, UnresolvableShapeError
from ..scope import resolve_id, resolve_parent_scope
from ..type_definitions import DispatchFailure, TypeDictionary
from ..type_path import TypePath
from .interpreters import INTERPRETERS
from .predicates import classify

logger = logging.getLogger(__name__)


def merge_types(target: TypeDictionary, source: TypeDictionary, schema_id: str | None = None) -> TypeDictionary:
    """
    Merge source into target, refusing to overwrite any path.

    Raises:
        PathCollisionError: If a path is present in both dictionaries
    """
    for path, type_def in source.items():
        if path in target:
            logger.error("Collision in type dict for key '%s'", path)
            raise PathCollisionError(path, target[path], type_def, schema_id)
        target[path] = type_def
    return target


class TypeWalker:
    """Walks the nodes of one schema document."""

    def __init__(self, schema_id: str, config: ParserConfig | None = None):
        """
        Initialize the walker.

        Args:
            schema_id: Id of the document being walked (used in errors)
            config: Parser configuration
        """
        self.schema_id = schema_id
        self.config = config or ParserConfig()
        self.dispatch_failures: list[DispatchFailure] = []

        # Nodes and paths currently being resolved
        self._resolving_nodes: set[int] = set()
        self._resolving_paths: set[str] = set()
        self._depth = 0

    def parse_type(self, node: Any, parent_scope: str, path: TypePath, name: str) -> TypeDictionary:
        """
        Parse a node and all of its descendants.

        Args:
            node: The raw schema node
            parent_scope: Scope inherited from the enclosing node
            path: Path of the enclosing container
            name: Segment naming this node within the container

        Returns:
            Type dictionary with the node and its descendants, empty if the
            node's shape could not be determined
        """
        node_id = resolve_id(node, parent_scope)
        scope = resolve_parent_scope(node_id, parent_scope)
        type_path = path.add_child(name)

        shape = classify(node)
        if shape is None:
            self._record_dispatch_failure(node, type_path)
            return {}

        logger.debug("Parsing %s with name: %s, path: %s", shape.value, name, type_path)

        with self._resolving(node, type_path):
            return INTERPRETERS[shape](self, node, scope, node_id, type_path, name)

    def parse_child(
        self, node: Any, scope: str, parent_path: TypePath, name: str | int, types: TypeDictionary
    ) -> TypePath | None:
        """
        Parse a nested child and merge its types into `types`.

        Returns:
            Path of the child if the child produced a type of its own
        """
        child_types = self.parse_type(node, scope, parent_path, str(name))
        merge_types(types, child_types, self.schema_id)

        child_path = parent_path.add_child(name)
        return child_path if str(child_path) in child_types else None

    def _record_dispatch_failure(self, node: Any, path: TypePath) -> None:
        keys = tuple(node.keys()) if isinstance(node, dict) else ()
        if self.config.strict:
            raise UnresolvableShapeError(str(path), keys)

        logger.warning("Could not determine parser for node at '%s': %r", path, node)
        self.dispatch_failures.append(DispatchFailure(path=str(path), keys=keys))

    @contextmanager
    def _resolving(self, node: Any, path: TypePath) -> Iterator[None]:
        """Guard against reentry and unbounded nesting."""
        rendered = str(path)
        if id(node) in self._resolving_nodes or rendered in self._resolving_paths:
            raise SchemaCycleError(rendered)
        if self._depth >= self.config.max_depth:
            raise RecursionDepthError(rendered, self.config.max_depth)

        self._resolving_nodes.add(id(node))
        self._resolving_paths.add(rendered)
        self._depth += 1
        try:
            yield
        except RecursionError:
            # Interpreter stack ran out before max_depth was reached
            raise RecursionDepthError(rendered, self._depth) from None
        finally:
            self._depth -= 1
            self._resolving_paths.discard(rendered)
            self._resolving_nodes.discard(id(node))
