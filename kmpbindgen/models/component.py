"""Component — one interface description plus its binding configuration.

A build is a list of components.  Each one corresponds to one compiled
library and produces one set of generated Kotlin sources:

    Component
      ci      ComponentInterface   (namespace, crate_name, parsed definitions)
      config  KotlinMultiplatformConfig

``crate_name`` is the join key between components; ``namespace`` seeds the
default package name, the default cdylib name, and every output file name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from kmpbindgen.config import FALLBACK_CDYLIB_NAME, FALLBACK_PACKAGE_NAME, SOURCE_SETS


class ComponentInterface(BaseModel):
    """Parsed interface description of a single library.

    Produced by the external parser; only ``namespace`` and ``crate_name``
    are read here.  ``definitions`` is handed to the renderer untouched.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str
    crate_name: str
    definitions: dict[str, Any] = Field(default_factory=dict)


class KotlinMultiplatformConfig(BaseModel):
    """Options from the ``[bindings.kotlin-multiplatform]`` table."""

    model_config = ConfigDict(frozen=True)

    package_name: str | None = None
    """Kotlin package for the generated sources (default ``uniffi.<namespace>``)."""

    cdylib_name: str | None = None
    """Native library loaded at runtime (default ``uniffi_<namespace>``)."""

    external_packages: dict[str, str] = Field(default_factory=dict)
    """Crate name -> Kotlin package of other components this one may import.

    Entries given in the configuration document are never replaced by
    computed values.
    """

    @property
    def effective_package_name(self) -> str:
        return self.package_name if self.package_name is not None else FALLBACK_PACKAGE_NAME

    @property
    def effective_cdylib_name(self) -> str:
        return self.cdylib_name if self.cdylib_name is not None else FALLBACK_CDYLIB_NAME


ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True)
class Component(Generic[ConfigT]):
    """An interface description paired with its language-specific config."""

    ci: ComponentInterface
    config: ConfigT

    @property
    def namespace(self) -> str:
        return self.ci.namespace

    @property
    def crate_name(self) -> str:
        return self.ci.crate_name


class GeneratedBundle(BaseModel):
    """Source text produced by the renderer for one component.

    One blob per source set plus the C header used by cinterop.  The
    blobs are written verbatim and never cross-checked.
    """

    common: str
    jvm: str
    native: str
    header: str

    def for_source_set(self, source_set: str) -> str:
        """Return the Kotlin text for ``common``, ``jvm`` or ``native``."""
        if source_set not in SOURCE_SETS:
            raise KeyError(f"Unknown source set: {source_set}")
        return getattr(self, source_set)
