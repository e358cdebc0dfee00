"""ConfigResolver — default naming and cross-component package links.

Runs once over the whole component list before anything is rendered:

1. Fill ``package_name`` (``uniffi.<namespace>``) and ``cdylib_name``
   (build-wide override, else ``uniffi_<namespace>``) where unset.
2. Map every crate name to its resolved package name.
3. Give each component an ``external_packages`` entry for every *other*
   crate, keeping any entry it already has.

Resolution never mutates its input.  It returns new components, and
running it on its own output returns equal components.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from kmpbindgen.config import DEFAULT_CDYLIB_PREFIX, DEFAULT_PACKAGE_PREFIX
from kmpbindgen.errors import DuplicateCrateError
from kmpbindgen.models.component import Component, KotlinMultiplatformConfig

logger = logging.getLogger(__name__)

KmpComponent = Component[KotlinMultiplatformConfig]


class ConfigResolver:
    """Resolve naming for every component of one build.

    Parameters
    ----------
    cdylib_override:
        Build-wide native library name.  Used for every component that
        does not set ``cdylib_name`` itself.
    """

    def __init__(self, cdylib_override: str | None = None) -> None:
        self.cdylib_override = cdylib_override

    def resolve(self, components: Sequence[KmpComponent]) -> list[KmpComponent]:
        """Return resolved copies of *components*, in the same order.

        Raises :class:`DuplicateCrateError` if two components share a
        crate name, since the package map would otherwise silently drop
        one of them.
        """
        defaulted = [self._apply_defaults(c) for c in components]
        packages = build_package_map(defaulted)
        resolved = [_link_external_packages(c, packages) for c in defaulted]
        logger.info(
            "Resolved configuration for %d component(s): %s",
            len(resolved),
            ", ".join(f"{c.crate_name}={c.config.package_name}" for c in resolved),
        )
        return resolved

    def _apply_defaults(self, component: KmpComponent) -> KmpComponent:
        config = component.config
        updates: dict[str, str] = {}
        if config.package_name is None:
            updates["package_name"] = f"{DEFAULT_PACKAGE_PREFIX}{component.namespace}"
        if config.cdylib_name is None:
            updates["cdylib_name"] = (
                self.cdylib_override
                if self.cdylib_override is not None
                else f"{DEFAULT_CDYLIB_PREFIX}{component.namespace}"
            )
        if not updates:
            return component
        return Component(ci=component.ci, config=config.model_copy(update=updates))


def build_package_map(components: Sequence[KmpComponent]) -> dict[str, str]:
    """Return ``crate_name -> package name`` for all *components*.

    Expects defaults to have been applied already.
    """
    packages: dict[str, str] = {}
    owners: dict[str, list[str]] = {}
    for component in components:
        owners.setdefault(component.crate_name, []).append(component.namespace)
        packages[component.crate_name] = component.config.effective_package_name

    for crate_name, namespaces in owners.items():
        if len(namespaces) > 1:
            raise DuplicateCrateError(crate_name, namespaces)
    return packages


def _link_external_packages(
    component: KmpComponent, packages: dict[str, str]
) -> KmpComponent:
    """Add every other crate's package to *component*'s external packages."""
    external = dict(component.config.external_packages)
    changed = False
    for crate_name, package_name in packages.items():
        if crate_name == component.crate_name:
            continue
        if crate_name in external:
            if external[crate_name] != package_name:
                logger.debug(
                    "%s: keeping configured package %r for crate %s (computed %r)",
                    component.namespace,
                    external[crate_name],
                    crate_name,
                    package_name,
                )
            continue
        external[crate_name] = package_name
        changed = True

    if not changed:
        return component
    return Component(
        ci=component.ci,
        config=component.config.model_copy(update={"external_packages": external}),
    )


def resolve_component_configs(
    components: Sequence[KmpComponent], cdylib_override: str | None = None
) -> list[KmpComponent]:
    """Functional shorthand for ``ConfigResolver(cdylib_override).resolve(...)``."""
    return ConfigResolver(cdylib_override).resolve(components)
