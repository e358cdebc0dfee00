"""Cross-component configuration resolution."""

from kmpbindgen.resolution.resolver import ConfigResolver, resolve_component_configs

__all__ = ["ConfigResolver", "resolve_component_configs"]
