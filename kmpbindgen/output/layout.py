"""Output layout consumed by the Kotlin Multiplatform Gradle plugin.

Every path is computed here, without touching the filesystem:

    <out_dir>/
        commonMain/kotlin/<package/path>/<namespace>.common.kt
        jvmMain/kotlin/<package/path>/<namespace>.jvm.kt
        nativeMain/kotlin/<package/path>/<namespace>.native.kt
        nativeInterop/cinterop/headers/<namespace>/<namespace>.h

``<package/path>`` is the resolved package name with each ``.`` turned
into a directory separator.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from kmpbindgen.config import (
    CINTEROP_DIRS,
    HEADER_EXTENSION,
    LANGUAGE_ROOT,
    SOURCE_EXTENSION,
    SOURCE_SETS,
)
from kmpbindgen.models.component import (
    Component,
    GeneratedBundle,
    KotlinMultiplatformConfig,
)


@dataclass(frozen=True)
class OutputFile:
    """A file to be written: destination path and verbatim content."""

    path: Path
    content: str


def package_path(package_name: str) -> Path:
    """Turn ``com.example.foo`` into ``com/example/foo``."""
    return Path(*package_name.split("."))


def kotlin_source_path(
    out_dir: str | Path,
    config: KotlinMultiplatformConfig,
    namespace: str,
    source_set: str,
) -> Path:
    """Return the destination of the Kotlin file for one source set."""
    if source_set not in SOURCE_SETS:
        raise ValueError(f"Unknown source set: {source_set}")
    return (
        Path(out_dir)
        / f"{source_set}Main"
        / LANGUAGE_ROOT
        / package_path(config.effective_package_name)
        / f"{namespace}.{source_set}.{SOURCE_EXTENSION}"
    )


def cinterop_header_path(out_dir: str | Path, namespace: str) -> Path:
    """Return the destination of the C header used by cinterop."""
    return Path(out_dir).joinpath(*CINTEROP_DIRS) / namespace / f"{namespace}.{HEADER_EXTENSION}"


def plan_bundle(
    out_dir: str | Path,
    component: Component[KotlinMultiplatformConfig],
    bundle: GeneratedBundle,
) -> list[OutputFile]:
    """Return the four files for *component*, source sets first, header last."""
    files = [
        OutputFile(
            kotlin_source_path(out_dir, component.config, component.namespace, source_set),
            bundle.for_source_set(source_set),
        )
        for source_set in SOURCE_SETS
    ]
    files.append(OutputFile(cinterop_header_path(out_dir, component.namespace), bundle.header))
    return files
