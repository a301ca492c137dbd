"""Config domain models for tweak.

Configuration is stored in .tweak/config.toml (with an optional global file)
and represents repository and user preferences for hashing, staging,
locking and output. This module defines the domain models that represent
validated configuration state.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Literal

from tweak.domain.entities import HASH_ALGORITHMS


@dataclass(frozen=True)
class ObjectsConfig:
    """Configuration for the object store.

    Attributes:
        hash_algorithm: Digest used to address objects ("blake3" or "sha1").
            Pinned in the project config at init time.

    Raises:
        ValueError: If hash_algorithm is not supported.
    """

    hash_algorithm: str = "blake3"

    def __post_init__(self) -> None:
        """Validate objects config after initialization."""
        if self.hash_algorithm not in HASH_ALGORITHMS:
            supported = ", ".join(sorted(HASH_ALGORITHMS))
            raise ValueError(
                f"hash_algorithm must be one of {supported}, got {self.hash_algorithm!r}"
            )


@dataclass(frozen=True)
class IndexConfig:
    """Configuration for the staging index.

    Attributes:
        dedupe_paths: If True, staging a path again replaces its earlier
            entry (last write wins). If False, every add is kept.
    """

    dedupe_paths: bool = False


@dataclass(frozen=True)
class CoreConfig:
    """Configuration for repository-wide behavior.

    Attributes:
        locking: Hold an exclusive lock on .tweak/lock while updating the
            index and HEAD.
    """

    locking: bool = True


@dataclass(frozen=True)
class DisplayConfig:
    """Configuration for output display and formatting.

    Attributes:
        color_scheme: Color output mode - "auto" (default), "always", or "never"
    """

    color_scheme: Literal["auto", "always", "never"] = "auto"

    def __post_init__(self) -> None:
        if self.color_scheme not in ("auto", "always", "never"):
            raise ValueError(
                f"color_scheme must be auto, always or never, got {self.color_scheme!r}"
            )


_SECTIONS = {
    "objects": ObjectsConfig,
    "index": IndexConfig,
    "core": CoreConfig,
    "display": DisplayConfig,
}


@dataclass(frozen=True)
class TweakConfig:
    """Complete tweak configuration.

    Attributes:
        objects: Object store configuration
        index: Staging index configuration
        core: Locking configuration
        display: Display and formatting configuration
    """

    objects: ObjectsConfig = field(default_factory=ObjectsConfig)
    index: IndexConfig = field(default_factory=IndexConfig)
    core: CoreConfig = field(default_factory=CoreConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @staticmethod
    def default() -> "TweakConfig":
        """Create a config with all default values."""
        return TweakConfig(
            objects=ObjectsConfig(),
            index=IndexConfig(),
            core=CoreConfig(),
            display=DisplayConfig(),
        )

    @staticmethod
    def from_partial(base: "TweakConfig", data: dict[str, Any]) -> "TweakConfig":
        """Overlay raw config data onto an existing config.

        Keys present in data replace the corresponding values in base;
        everything else is inherited. Unknown sections and keys are ignored.

        Args:
            base: Config providing values for anything data omits.
            data: Parsed TOML data ({section: {key: value}}).

        Returns:
            New TweakConfig with overrides applied.

        Raises:
            ValueError: If a section is not a table or a value fails validation.
        """
        updates: dict[str, Any] = {}
        for name, section_cls in _SECTIONS.items():
            if name not in data:
                continue
            section_data = data[name]
            if not isinstance(section_data, dict):
                raise ValueError(f"[{name}] must be a table")
            known = {f.name for f in fields(section_cls)}
            overrides = {k: v for k, v in section_data.items() if k in known}
            updates[name] = replace(getattr(base, name), **overrides)
        return replace(base, **updates)


def config_keys() -> list[str]:
    """Return every settable key as 'section.name', in declaration order."""
    return [
        f"{section}.{f.name}"
        for section, section_cls in _SECTIONS.items()
        for f in fields(section_cls)
    ]
