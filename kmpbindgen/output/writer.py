"""BindingsWriter — render each component and write its four files.

Components are handled strictly in order.  The first failure, whether
from the renderer or from the filesystem, stops the pass: later
components are not rendered, and files already written stay on disk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from kmpbindgen.errors import BindgenError, GenerationError
from kmpbindgen.models.component import (
    Component,
    ComponentInterface,
    GeneratedBundle,
    KotlinMultiplatformConfig,
)
from kmpbindgen.output.filesystem import FileSystem, LocalFileSystem
from kmpbindgen.output.layout import plan_bundle

logger = logging.getLogger(__name__)

BindingsRenderer = Callable[[KotlinMultiplatformConfig, ComponentInterface], GeneratedBundle]
"""Template engine hook: ``(config, interface) -> GeneratedBundle``."""


class BindingsWriter:
    """Write generated bindings through a :class:`FileSystem`.

    Parameters
    ----------
    filesystem:
        Storage backend.  Defaults to the local disk.
    """

    def __init__(self, filesystem: FileSystem | None = None) -> None:
        self.filesystem = filesystem or LocalFileSystem()

    def write(
        self,
        components: Sequence[Component[KotlinMultiplatformConfig]],
        renderer: BindingsRenderer,
        out_dir: str | Path,
    ) -> list[Path]:
        """Render and write every component.

        Returns the written paths in write order.  Raises
        :class:`GenerationError` or :class:`FileSystemError` on the first
        failure.
        """
        out_dir = Path(out_dir)
        written: list[Path] = []
        for component in components:
            bundle = self._render(component, renderer)
            for output in plan_bundle(out_dir, component, bundle):
                self.filesystem.create_dir_all(output.path.parent)
                self.filesystem.write_text(output.path, output.content)
                written.append(output.path)
            logger.info(
                "Wrote bindings for %s (package %s) to %s",
                component.namespace,
                component.config.effective_package_name,
                out_dir,
            )
        return written

    @staticmethod
    def _render(
        component: Component[KotlinMultiplatformConfig], renderer: BindingsRenderer
    ) -> GeneratedBundle:
        try:
            return renderer(component.config, component.ci)
        except BindgenError:
            raise
        except Exception as exc:
            raise GenerationError(component.namespace, str(exc) or type(exc).__name__) from exc
