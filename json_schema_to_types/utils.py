"""
Helpers shared by the command line tool.
"""

import re
from pathlib import Path

_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")


def module_name_from_path(path: str | Path) -> str:
    """Derive a PascalCase module name from a schema file name.

    Examples:
        "definitions.json" -> "Definitions"
        "circle_shape.schema.json" -> "CircleShape"
        "user-profile.json" -> "UserProfile"
    """
    stem = Path(path).name.split(".")[0]
    words = _WORD_PATTERN.findall(stem.replace("_", " ").replace("-", " "))
    return "".join(word.capitalize() for word in words)
