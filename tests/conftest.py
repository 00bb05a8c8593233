"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


def write_file(path: Path, size: int = 0) -> Path:
    """Create *path* (and its parents) with *size* bytes of content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def node_project(tmp_path):
    """A root holding proj/package.json and a 1,000,000 byte node_modules."""
    root = tmp_path / "root"
    write_file(root / "proj" / "package.json", 20)
    write_file(root / "proj" / "node_modules" / "big.bin", 1_000_000)
    return root


@pytest.fixture
def mixed_tree(tmp_path):
    """A root with several projects, some matching and some not."""
    root = tmp_path / "root"
    # Node project with a nested node_modules inside the dependency folder
    write_file(root / "web" / "package.json", 10)
    write_file(root / "web" / "node_modules" / "lodash" / "index.js", 300)
    write_file(root / "web" / "node_modules" / "lodash" / "package.json", 50)
    write_file(root / "web" / "node_modules" / "lodash" / "node_modules" / "dep" / "a.js", 70)
    # Rust project
    write_file(root / "crate" / "Cargo.toml", 10)
    write_file(root / "crate" / "target" / "debug" / "app", 2_000)
    # .NET project
    write_file(root / "dotnet" / "App.csproj", 10)
    write_file(root / "dotnet" / "bin" / "App.dll", 400)
    write_file(root / "dotnet" / "obj" / "App.cache", 100)
    # Python virtual environments need no indicator
    write_file(root / "py" / "venv" / "pyvenv.cfg", 25)
    write_file(root / "py2" / ".venv" / "pyvenv.cfg", 35)
    # Not matching: vendor without composer.json, lib/bin without a csproj
    write_file(root / "go" / "vendor" / "mod.go", 500)
    write_file(root / "lib" / "bin" / "tool", 60)
    return root
