"""Data models shared by resolution, rendering, and output."""

from kmpbindgen.models.component import (
    Component,
    ComponentInterface,
    GeneratedBundle,
    KotlinMultiplatformConfig,
)

__all__ = [
    "Component",
    "ComponentInterface",
    "GeneratedBundle",
    "KotlinMultiplatformConfig",
]
