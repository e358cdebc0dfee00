"""run_generation — resolve every component, then write its bindings."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from kmpbindgen.bindings.base import BindingGenerator
from kmpbindgen.models.component import Component
from kmpbindgen.settings import GenerationSettings

logger = logging.getLogger(__name__)


def run_generation(
    generator: BindingGenerator,
    settings: GenerationSettings,
    components: Sequence[Component],
) -> list[Path]:
    """Resolve naming across *components* and write all their bindings.

    Resolution finishes before the first file is written.  Returns the
    written paths.
    """
    resolved = generator.update_component_configs(settings, components)
    written = generator.write_bindings(settings, resolved)
    logger.info(
        "Generated %s bindings for %d component(s) (%d files) in %s",
        generator.language,
        len(resolved),
        len(written),
        settings.out_dir,
    )
    return written
