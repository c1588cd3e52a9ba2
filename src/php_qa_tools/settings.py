"""Settings collected by the setup wizard."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

ENABLE_PHP_LINT = "enablePhpLint"
ENABLE_PHP_CS_FIXER = "enablePhpCsFixer"
PHP_CS_FIXER_LEVEL = "phpCsFixerLevel"
ENABLE_PHP_MESS_DETECTOR = "enablePhpMessDetector"
ENABLE_PHP_CODE_SNIFFER = "enablePhpCodeSniffer"
PHP_CODE_SNIFFER_CODING_STYLE = "phpCodeSnifferCodingStyle"
ENABLE_PHP_COPY_PASTE_DETECTION = "enablePhpCopyPasteDetection"
ENABLE_PHP_SECURITY_CHECKER = "enablePhpSecurityChecker"
PHP_SRC_PATH = "phpSrcPath"
ENABLE_PHP_UNIT = "enablePhpUnit"
PHP_TESTS_PATH = "phpTestsPath"
ENABLE_PHP_UNIT_AUTOLOAD = "enablePhpUnitAutoload"
PHP_TESTS_AUTOLOAD_PATH = "phpTestsAutoloadPath"
BUILD_ARTIFACTS_PATH = "buildArtifactsPath"

SETTING_NAMES = (
    ENABLE_PHP_LINT,
    ENABLE_PHP_CS_FIXER,
    PHP_CS_FIXER_LEVEL,
    ENABLE_PHP_MESS_DETECTOR,
    ENABLE_PHP_CODE_SNIFFER,
    PHP_CODE_SNIFFER_CODING_STYLE,
    ENABLE_PHP_COPY_PASTE_DETECTION,
    ENABLE_PHP_SECURITY_CHECKER,
    PHP_SRC_PATH,
    ENABLE_PHP_UNIT,
    PHP_TESTS_PATH,
    ENABLE_PHP_UNIT_AUTOLOAD,
    PHP_TESTS_AUTOLOAD_PATH,
    BUILD_ARTIFACTS_PATH,
)

TOOL_FLAGS = (
    ENABLE_PHP_LINT,
    ENABLE_PHP_CS_FIXER,
    ENABLE_PHP_MESS_DETECTOR,
    ENABLE_PHP_CODE_SNIFFER,
    ENABLE_PHP_COPY_PASTE_DETECTION,
    ENABLE_PHP_SECURITY_CHECKER,
    ENABLE_PHP_UNIT,
)

DEFAULT_BUILD_ARTIFACTS_PATH = "build/artifacts"


def default_settings() -> Dict[str, Any]:
    defaults: Dict[str, Any] = {BUILD_ARTIFACTS_PATH: DEFAULT_BUILD_ARTIFACTS_PATH}
    for flag in TOOL_FLAGS:
        defaults[flag] = False
    return defaults


class SettingsStore(Mapping[str, Any]):
    """Ordered, immutable mapping of setting name to value.

    ``set`` never mutates; it returns a new store with the entry added or
    replaced, so each flow step hands an updated store to the next one.
    Reading a key that was never set yields ``None``.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(values or {})

    @classmethod
    def with_defaults(cls) -> "SettingsStore":
        return cls(default_settings())

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def set(self, name: str, value: Any) -> "SettingsStore":
        values = dict(self._values)
        values[name] = value
        return SettingsStore(values)

    def all(self) -> Mapping[str, Any]:
        """Read-only view used wholesale as template context."""

        return MappingProxyType(self._values)

    def any_enabled(self, *names: str) -> bool:
        return any(bool(self._values.get(name)) for name in names)

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SettingsStore({self._values!r})"


__all__ = [
    "SettingsStore",
    "SETTING_NAMES",
    "TOOL_FLAGS",
    "DEFAULT_BUILD_ARTIFACTS_PATH",
    "default_settings",
]
