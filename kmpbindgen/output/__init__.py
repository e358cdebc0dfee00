"""Materialise rendered bindings into the Kotlin Multiplatform layout."""

from kmpbindgen.output.filesystem import FileSystem, LocalFileSystem, MemoryFileSystem
from kmpbindgen.output.layout import (
    OutputFile,
    cinterop_header_path,
    kotlin_source_path,
    package_path,
    plan_bundle,
)
from kmpbindgen.output.writer import BindingsRenderer, BindingsWriter

__all__ = [
    "BindingsRenderer",
    "BindingsWriter",
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    "OutputFile",
    "cinterop_header_path",
    "kotlin_source_path",
    "package_path",
    "plan_bundle",
]
