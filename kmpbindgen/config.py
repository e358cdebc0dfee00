"""Global configuration: naming defaults, layout constants, settings keys."""

# Default naming applied to components that leave these options unset
DEFAULT_PACKAGE_PREFIX = "uniffi."
DEFAULT_CDYLIB_PREFIX = "uniffi_"

# Returned by the config accessors when nothing has been resolved yet
FALLBACK_PACKAGE_NAME = "uniffi"
FALLBACK_CDYLIB_NAME = "uniffi"

# Table name under ``[bindings]`` in the configuration document
CONFIG_SECTION = "kotlin-multiplatform"

# Source sets understood by the Kotlin Multiplatform Gradle plugin, in write order
SOURCE_SETS = ("common", "jvm", "native")

# Directory below ``<sourceSet>Main`` holding Kotlin sources
LANGUAGE_ROOT = "kotlin"
SOURCE_EXTENSION = "kt"

# cinterop header location: nativeInterop/cinterop/headers/<namespace>/<namespace>.h
CINTEROP_DIRS = ("nativeInterop", "cinterop", "headers")
HEADER_EXTENSION = "h"

# Environment variables consulted by kmpbindgen.settings
ENV_CDYLIB = "KMPBINDGEN_CDYLIB"
ENV_LOG_LEVEL = "KMPBINDGEN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
