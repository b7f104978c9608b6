# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Incremental build workflow turning ``.act`` files into batch scripts.

A generated script is reused when it already exists and is strictly newer
than its source file. Scripts are written only for sources that transpile
successfully, so a failed build never leaves partial output behind.

The up-to-date check compares modification times only. A script generated
by an older transpiler release is reused as long as it is newer than its
source; pass ``force=True`` to regenerate every script.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from act.compiler.pipeline import TranspileResult, transpile
from act.workspace.config import ProjectConfig

# ###############
# Public Interface
# ###############


class BuildError(Exception):
    """Raised when a source file or generated script cannot be read or written."""


@dataclass
class BuildOutcome:
    """Result of building one source file.

    Attributes:
        source: The ``.act`` source file.
        target: The generated script path (written only on success).
        result: The transpilation result.
        cached: True if an up-to-date script was reused without transpiling.
    """

    source: Path
    target: Path
    result: TranspileResult
    cached: bool = False


def transpile_file(source: Path, target: Path) -> TranspileResult:
    """Transpile one source file and write the generated script on success.

    Args:
        source: Path to the UTF-8 encoded ``.act`` file.
        target: Destination of the generated script. Parent directories are
            created as needed.

    Returns:
        The transpilation result. Nothing is written when it carries a diagnostic.

    Raises:
        BuildError: If the source cannot be read or the script cannot be written.
    """
    try:
        source_text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise BuildError(f"Cannot read source file '{source}': {exc}") from exc

    result = transpile(source_text)
    script = result.value
    if not isinstance(script, str):
        return result

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        # Keep LF line endings byte-for-byte as generated.
        target.write_text(script, encoding="utf-8", newline="")
    except OSError as exc:
        raise BuildError(f"Cannot write script '{target}': {exc}") from exc
    return result


def build_project(root: Path, config: ProjectConfig, *, force: bool = False) -> list[BuildOutcome]:
    """Build every source file of a project.

    Sources are selected with the glob patterns in *config* relative to
    *root*; files inside the build directory are ignored. Each script mirrors
    its source's relative path under the build directory.

    Args:
        root: The project root directory.
        config: The project configuration.
        force: Transpile every source even when its script is up to date.

    Returns:
        One outcome per source file, sorted by source path.

    Raises:
        BuildError: On I/O failures.
    """
    build_dir = root / config.build_directory
    outcomes: list[BuildOutcome] = []
    for source in _collect_sources(root, config.sources, build_dir):
        target = _script_path(source, root, build_dir, config.script_suffix)
        if not force and _is_up_to_date(source, target):
            try:
                script = target.read_text(encoding="utf-8")
            except OSError as exc:
                raise BuildError(f"Cannot read script '{target}': {exc}") from exc
            cached = TranspileResult(success=True, value=script)
            outcomes.append(BuildOutcome(source=source, target=target, result=cached, cached=True))
            continue
        result = transpile_file(source, target)
        outcomes.append(BuildOutcome(source=source, target=target, result=result))
    return outcomes


# ################
# Implementation
# ################


def _collect_sources(root: Path, patterns: list[str], build_dir: Path) -> list[Path]:
    """Return the unique files matched by *patterns*, skipping the build directory."""
    found: set[Path] = set()
    for pattern in patterns:
        for path in root.glob(pattern):
            if path.is_file() and build_dir not in path.parents:
                found.add(path)
    return sorted(found)


def _script_path(source: Path, root: Path, build_dir: Path, suffix: str) -> Path:
    """Return the script path mirroring *source* under *build_dir*."""
    return build_dir / source.relative_to(root).with_suffix(suffix)


def _is_up_to_date(source: Path, target: Path) -> bool:
    """Return True if *target* exists and is strictly newer than *source*."""
    if not target.exists():
        return False
    return target.stat().st_mtime > source.stat().st_mtime
