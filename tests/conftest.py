"""Shared pytest fixtures for apilint tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from apilint.domain.types import Kind, Member, TypeDef

SAMPLE_SCHEMA = """\
# Core API types.
types:
  - name: Pod
    kind: struct
    members:
      - name: Name
        type: string
      - name: Containers
        type:
          kind: slice
          elem: {kind: struct, name: Container}
        comments:
          - Containers in the pod.
      - name: Volumes
        type:
          kind: slice
          elem: {kind: struct, name: Volume}
        comments:
          - "+listType=atomic"
  - name: Container
    kind: struct
    members:
      - name: Ports
        type: {kind: slice, elem: {kind: primitive, name: int32}}
        tags:
          listType: map
      - name: Args
        type: {kind: slice, elem: string}
  - name: Labels
    kind: map
    key: string
    elem: string
"""

CLEAN_SCHEMA = """\
types:
  - name: Service
    kind: struct
    members:
      - name: Ports
        type: {kind: slice, elem: string}
        comments: ["+listType=set"]
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def pod_type() -> TypeDef:
    """Pod struct: a primitive, an untagged slice, and a tagged slice."""
    return TypeDef(
        name="Pod",
        kind=Kind.STRUCT,
        members=(
            Member(name="Name", type=TypeDef(kind=Kind.PRIMITIVE)),
            Member(name="Containers", type=TypeDef(kind=Kind.SLICE)),
            Member(
                name="Volumes",
                type=TypeDef(kind=Kind.SLICE),
                tags={"listType": ["atomic"]},
            ),
        ),
    )


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    """YAML schema with two violations (Container.Args, Pod.Containers)."""
    path = tmp_path / "types.yaml"
    path.write_text(SAMPLE_SCHEMA, encoding="utf-8")
    return path


@pytest.fixture
def clean_schema_file(tmp_path: Path) -> Path:
    """YAML schema with no violations."""
    path = tmp_path / "clean.yaml"
    path.write_text(CLEAN_SCHEMA, encoding="utf-8")
    return path


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config discovery leaks.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.delenv("APILINT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
