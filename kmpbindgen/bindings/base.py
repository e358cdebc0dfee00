"""Abstract BindingGenerator interface.

One implementation exists per target language.  Each declares its own
configuration model and implements the three steps the build drives:

1. ``new_config`` — read the language's table from the config document.
2. ``update_component_configs`` — resolve naming across all components.
3. ``write_bindings`` — render and write every component.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Generic

from kmpbindgen.models.component import Component, ConfigT
from kmpbindgen.settings import GenerationSettings


class BindingGenerator(abc.ABC, Generic[ConfigT]):
    """Base class for all target-language binding generators."""

    @property
    @abc.abstractmethod
    def language(self) -> str:
        """Target identifier, also the ``[bindings.<language>]`` table name."""

    @abc.abstractmethod
    def new_config(self, document: Mapping[str, Any]) -> ConfigT:
        """Build this language's config from a parsed configuration document.

        Raises :class:`ConfigParseError` if the language table is malformed.
        """

    @abc.abstractmethod
    def update_component_configs(
        self,
        settings: GenerationSettings,
        components: Sequence[Component[ConfigT]],
    ) -> list[Component[ConfigT]]:
        """Return components with naming resolved across the whole build."""

    @abc.abstractmethod
    def write_bindings(
        self,
        settings: GenerationSettings,
        components: Sequence[Component[ConfigT]],
    ) -> list[Path]:
        """Render and write every component, returning the written paths."""
