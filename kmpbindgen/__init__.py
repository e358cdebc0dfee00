"""kmpbindgen — Kotlin Multiplatform output layer for cross-language bindings."""

__version__ = "1.0.0"

from kmpbindgen.bindings import (
    GENERATOR_REGISTRY,
    BindingGenerator,
    KotlinMultiplatformBindingGenerator,
    get_generator,
)
from kmpbindgen.errors import (
    BindgenError,
    ConfigError,
    ConfigParseError,
    DuplicateCrateError,
    FileSystemError,
    GenerationError,
)
from kmpbindgen.models.component import (
    Component,
    ComponentInterface,
    GeneratedBundle,
    KotlinMultiplatformConfig,
)
from kmpbindgen.output.filesystem import FileSystem, LocalFileSystem, MemoryFileSystem
from kmpbindgen.output.writer import BindingsWriter
from kmpbindgen.pipeline import run_generation
from kmpbindgen.resolution.resolver import ConfigResolver, resolve_component_configs
from kmpbindgen.settings import (
    GenerationSettings,
    configure_logging,
    load_config_document,
    load_settings,
)

__all__ = [
    "__version__",
    # Models
    "Component",
    "ComponentInterface",
    "GeneratedBundle",
    "KotlinMultiplatformConfig",
    "GenerationSettings",
    # Resolution
    "ConfigResolver",
    "resolve_component_configs",
    # Output
    "BindingsWriter",
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    # Generators
    "BindingGenerator",
    "GENERATOR_REGISTRY",
    "KotlinMultiplatformBindingGenerator",
    "get_generator",
    "run_generation",
    # Settings
    "configure_logging",
    "load_config_document",
    "load_settings",
    # Errors
    "BindgenError",
    "ConfigError",
    "ConfigParseError",
    "DuplicateCrateError",
    "FileSystemError",
    "GenerationError",
]
