"""
Identifier scope resolution.

Every schema node may declare an "id" that changes the base URI against
which the "id" and "$ref" values of its descendants resolve.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import unquote, urldefrag, urljoin, urlsplit

URN_SCHEME = "urn"


def is_urn(uri: str | None) -> bool:
    """Check whether a URI uses the urn scheme."""
    return uri is not None and urlsplit(uri).scheme == URN_SCHEME


def resolve_id(node: Any, parent_scope: str) -> str | None:
    """
    Compute the effective identifier of a node.

    Args:
        node: The raw schema node
        parent_scope: Base URI inherited from the enclosing node

    Returns:
        None when the node declares no string "id", the id itself when it is
        urn-scoped, otherwise the id merged against the parent scope
    """
    if not isinstance(node, dict):
        return None

    declared = node.get("id")
    if not isinstance(declared, str):
        return None

    if is_urn(declared):
        return declared

    return urljoin(parent_scope, declared)


def resolve_parent_scope(resolved_id: str | None, parent_scope: str) -> str:
    """Scope handed down to the children of a node."""
    if resolved_id is not None and not is_urn(resolved_id):
        return resolved_id
    return parent_scope


def resolve_reference(ref: str, scope: str) -> tuple[str, str]:
    """
    Split a "$ref" value into the document it targets and its fragment.

    Args:
        ref: The raw "$ref" value
        scope: Scope of the node carrying the reference

    Returns:
        (absolute document URI without fragment, fragment with leading "#")
    """
    if ref.startswith("#"):
        document, fragment = urldefrag(scope).url, ref[1:]
    elif is_urn(ref):
        document, fragment = urldefrag(ref)
    else:
        document, fragment = urldefrag(urljoin(scope, ref))
    return document, f"#{unquote(fragment)}"
