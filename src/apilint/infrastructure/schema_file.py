"""Schema document I/O.

YAML documents go through ruamel.yaml in round-trip mode so that comments,
quoting and key order survive a read-modify-write cycle (``apilint fix``).
JSON documents are read and written with the stdlib ``json`` module.
"""

from __future__ import annotations

import json
from io import StringIO
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
JSON_SUFFIXES = frozenset({".json"})


class DocumentError(ValueError):
    """Raised when a schema file cannot be read or parsed."""


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML parser.

    ruamel.yaml's YAML object is stateful; a failed dump can leave a
    shared instance broken, so every operation gets its own.
    """
    y = YAML()
    y.preserve_quotes = True
    y.default_flow_style = False
    y.indent(mapping=2, sequence=4, offset=2)
    return y


def is_supported(path: Path) -> bool:
    """Whether *path* has a schema document suffix."""
    return path.suffix.lower() in YAML_SUFFIXES | JSON_SUFFIXES


def read_document(path: Path) -> Any:
    """Load a schema document.  An empty file loads as an empty mapping."""
    suffix = path.suffix.lower()
    if not is_supported(path):
        msg = f"{path}: unsupported schema file type {suffix or '(none)'!r}"
        raise DocumentError(msg)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"{path}: {exc.strerror or exc}"
        raise DocumentError(msg) from exc
    except UnicodeDecodeError as exc:
        msg = f"{path}: not valid UTF-8 (byte {exc.start})"
        raise DocumentError(msg) from exc

    if not text.strip():
        return {}
    try:
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
        return _new_yaml().load(text)
    except (YAMLError, json.JSONDecodeError) as exc:
        msg = f"{path}: invalid {'JSON' if suffix in JSON_SUFFIXES else 'YAML'}: {exc}"
        raise DocumentError(msg) from exc


def render_document(path: Path, document: Any) -> str:
    """Serialize *document* in the format implied by *path*'s suffix."""
    if path.suffix.lower() in JSON_SUFFIXES:
        return json.dumps(document, indent=2) + "\n"
    buf = StringIO()
    _new_yaml().dump(document, buf)
    return buf.getvalue()


def write_document(path: Path, document: Any) -> None:
    """Write *document* back to *path*."""
    path.write_text(render_document(path, document), encoding="utf-8")
