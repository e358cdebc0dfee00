"""Tests for cross-component configuration resolution.

Covers default package and cdylib naming, the build-wide cdylib override,
external package linking, precedence of configured entries, idempotency,
input immutability, and duplicate crate rejection.
"""

from __future__ import annotations

import pytest

from kmpbindgen.errors import DuplicateCrateError
from kmpbindgen.models.component import (
    Component,
    ComponentInterface,
    KotlinMultiplatformConfig,
)
from kmpbindgen.resolution.resolver import (
    ConfigResolver,
    build_package_map,
    resolve_component_configs,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _component(namespace: str, crate_name: str | None = None, **config) -> Component:
    ci = ComponentInterface(namespace=namespace, crate_name=crate_name or f"{namespace}_crate")
    return Component(ci=ci, config=KotlinMultiplatformConfig(**config))


@pytest.fixture()
def components() -> list[Component]:
    return [
        _component("geometry"),
        _component("sprites", package_name="com.example.sprites"),
        _component("audio", cdylib_name="native_audio"),
    ]


def _by_namespace(components: list[Component]) -> dict[str, Component]:
    return {c.namespace: c for c in components}


# ---------------------------------------------------------------------------
# Default naming
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_package_name_defaults_to_uniffi_namespace(self, components):
        resolved = _by_namespace(resolve_component_configs(components))
        assert resolved["geometry"].config.package_name == "uniffi.geometry"
        assert resolved["audio"].config.package_name == "uniffi.audio"

    def test_explicit_package_name_kept(self, components):
        resolved = _by_namespace(resolve_component_configs(components))
        assert resolved["sprites"].config.package_name == "com.example.sprites"

    def test_cdylib_defaults_to_uniffi_underscore_namespace(self, components):
        resolved = _by_namespace(resolve_component_configs(components))
        assert resolved["geometry"].config.cdylib_name == "uniffi_geometry"
        assert resolved["sprites"].config.cdylib_name == "uniffi_sprites"

    def test_explicit_cdylib_kept(self, components):
        resolved = _by_namespace(resolve_component_configs(components))
        assert resolved["audio"].config.cdylib_name == "native_audio"

    def test_global_cdylib_override(self, components):
        resolved = _by_namespace(ConfigResolver(cdylib_override="megalib").resolve(components))
        assert resolved["geometry"].config.cdylib_name == "megalib"
        assert resolved["sprites"].config.cdylib_name == "megalib"

    def test_global_override_does_not_beat_explicit_cdylib(self, components):
        resolved = _by_namespace(ConfigResolver(cdylib_override="megalib").resolve(components))
        assert resolved["audio"].config.cdylib_name == "native_audio"

    def test_empty_global_override_is_still_an_override(self, components):
        resolved = _by_namespace(ConfigResolver(cdylib_override="").resolve(components))
        assert resolved["geometry"].config.cdylib_name == ""
        assert resolved["audio"].config.cdylib_name == "native_audio"

    def test_order_preserved(self, components):
        resolved = resolve_component_configs(components)
        assert [c.namespace for c in resolved] == ["geometry", "sprites", "audio"]

    def test_empty_build(self):
        assert resolve_component_configs([]) == []


# ---------------------------------------------------------------------------
# External packages
# ---------------------------------------------------------------------------


class TestExternalPackages:
    def test_links_every_other_crate(self, components):
        resolved = _by_namespace(resolve_component_configs(components))
        assert resolved["geometry"].config.external_packages == {
            "sprites_crate": "com.example.sprites",
            "audio_crate": "uniffi.audio",
        }

    def test_never_links_own_crate(self, components):
        for component in resolve_component_configs(components):
            assert component.crate_name not in component.config.external_packages

    def test_single_component_has_no_external_packages(self):
        resolved = resolve_component_configs([_component("solo")])
        assert resolved[0].config.external_packages == {}

    def test_configured_entry_never_overwritten(self):
        components = [
            _component("app", external_packages={"lib_crate": "org.vendor.lib"}),
            _component("lib"),
        ]
        resolved = _by_namespace(resolve_component_configs(components))
        assert resolved["app"].config.external_packages["lib_crate"] == "org.vendor.lib"
        assert resolved["lib"].config.external_packages["app_crate"] == "uniffi.app"

    def test_configured_entry_for_unknown_crate_kept(self):
        components = [
            _component("app", external_packages={"elsewhere": "org.elsewhere"}),
            _component("lib"),
        ]
        resolved = _by_namespace(resolve_component_configs(components))
        assert resolved["app"].config.external_packages == {
            "elsewhere": "org.elsewhere",
            "lib_crate": "uniffi.lib",
        }

    def test_package_map(self, components):
        defaulted = resolve_component_configs(components)
        assert build_package_map(defaulted) == {
            "geometry_crate": "uniffi.geometry",
            "sprites_crate": "com.example.sprites",
            "audio_crate": "uniffi.audio",
        }


# ---------------------------------------------------------------------------
# Purity and idempotency
# ---------------------------------------------------------------------------


class TestPurity:
    def test_idempotent(self, components):
        once = resolve_component_configs(components)
        twice = resolve_component_configs(once)
        assert twice == once

    def test_idempotent_with_override(self, components):
        resolver = ConfigResolver(cdylib_override="megalib")
        once = resolver.resolve(components)
        assert resolver.resolve(once) == once

    def test_input_not_mutated(self, components):
        before = [c.config.model_copy(deep=True) for c in components]
        resolve_component_configs(components)
        assert [c.config for c in components] == before

    def test_interface_shared_not_copied(self, components):
        resolved = resolve_component_configs(components)
        assert all(r.ci is c.ci for r, c in zip(resolved, components))


# ---------------------------------------------------------------------------
# Duplicate crate names
# ---------------------------------------------------------------------------


class TestDuplicateCrates:
    def test_duplicate_crate_rejected(self):
        components = [_component("one", "shared"), _component("two", "shared")]
        with pytest.raises(DuplicateCrateError) as excinfo:
            resolve_component_configs(components)
        assert excinfo.value.crate_name == "shared"
        assert excinfo.value.namespaces == ["one", "two"]

    def test_duplicate_reports_crate_in_message(self):
        components = [_component("one", "shared"), _component("two", "shared")]
        with pytest.raises(DuplicateCrateError, match="shared"):
            resolve_component_configs(components)
