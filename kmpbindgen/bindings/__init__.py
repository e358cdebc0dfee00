"""Binding generators — one per target language."""

from __future__ import annotations

from kmpbindgen.bindings.base import BindingGenerator
from kmpbindgen.bindings.kotlin_multiplatform import KotlinMultiplatformBindingGenerator
from kmpbindgen.errors import ConfigError
from kmpbindgen.output.filesystem import FileSystem
from kmpbindgen.output.writer import BindingsRenderer

GENERATOR_REGISTRY: dict[str, type[BindingGenerator]] = {
    "kotlin-multiplatform": KotlinMultiplatformBindingGenerator,
}


def get_generator(
    language: str,
    renderer: BindingsRenderer,
    filesystem: FileSystem | None = None,
) -> BindingGenerator:
    """Return the generator instance for a target language."""
    generator_cls = GENERATOR_REGISTRY.get(language)
    if generator_cls is None:
        known = ", ".join(sorted(GENERATOR_REGISTRY))
        raise ConfigError(f"No binding generator for {language!r} (known: {known})")
    return generator_cls(renderer, filesystem)


__all__ = [
    "BindingGenerator",
    "KotlinMultiplatformBindingGenerator",
    "GENERATOR_REGISTRY",
    "get_generator",
]
