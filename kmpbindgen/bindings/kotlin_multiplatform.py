"""Kotlin Multiplatform binding generator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from kmpbindgen.bindings.base import BindingGenerator
from kmpbindgen.config import CONFIG_SECTION
from kmpbindgen.errors import ConfigParseError
from kmpbindgen.models.component import Component, KotlinMultiplatformConfig
from kmpbindgen.output.filesystem import FileSystem
from kmpbindgen.output.writer import BindingsRenderer, BindingsWriter
from kmpbindgen.resolution.resolver import ConfigResolver
from kmpbindgen.settings import GenerationSettings


class KotlinMultiplatformBindingGenerator(BindingGenerator[KotlinMultiplatformConfig]):
    """Generates common, JVM and native Kotlin sources plus a cinterop header.

    Parameters
    ----------
    renderer:
        Template engine producing a :class:`GeneratedBundle` per component.
    filesystem:
        Storage backend for the writer.  Defaults to the local disk.
    """

    def __init__(
        self,
        renderer: BindingsRenderer,
        filesystem: FileSystem | None = None,
    ) -> None:
        self.renderer = renderer
        self.writer = BindingsWriter(filesystem)

    @property
    def language(self) -> str:
        return CONFIG_SECTION

    def new_config(self, document: Mapping[str, Any]) -> KotlinMultiplatformConfig:
        bindings = document.get("bindings", {})
        if not isinstance(bindings, Mapping):
            raise ConfigParseError("[bindings] must be a table")
        section = bindings.get(CONFIG_SECTION)
        if section is None:
            return KotlinMultiplatformConfig()
        if not isinstance(section, Mapping):
            raise ConfigParseError(f"[bindings.{CONFIG_SECTION}] must be a table")
        try:
            return KotlinMultiplatformConfig.model_validate(dict(section))
        except ValidationError as exc:
            raise ConfigParseError(f"Invalid [bindings.{CONFIG_SECTION}] table: {exc}") from exc

    def update_component_configs(
        self,
        settings: GenerationSettings,
        components: Sequence[Component[KotlinMultiplatformConfig]],
    ) -> list[Component[KotlinMultiplatformConfig]]:
        return ConfigResolver(settings.cdylib).resolve(components)

    def write_bindings(
        self,
        settings: GenerationSettings,
        components: Sequence[Component[KotlinMultiplatformConfig]],
    ) -> list[Path]:
        return self.writer.write(components, self.renderer, settings.out_dir)
