# topmark:header:start
#
#   project      : antsi
#   file         : model.py
#   file_relpath : src/antsi/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model: an immutable `Config` and its mutable builder.

`MutableConfig` collects settings from defaults, discovered files, explicit
files and CLI overrides; fields are tri-state (``None`` = inherit) so that a
last-wins merge does not lose information. `MutableConfig.freeze` produces the
immutable `Config` used at runtime; `Config.thaw` goes the other way.

Recognized keys (``antsi.toml`` top level, or ``[tool.antsi]``):

```toml
color = "auto"    # auto | always | never
newline = true    # CLI: terminate rendered output with a newline
root = false      # stop upward discovery in this directory
```
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from antsi.config.io import extract_settings, load_toml_dict
from antsi.config.logging import get_logger
from antsi.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME
from antsi.core.enum_mixins import join_keys
from antsi.core.errors import ConfigError
from antsi.rendering.capability import ColorMode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from antsi.config.io import TomlTable
    from antsi.config.logging import AntsiLogger

logger: AntsiLogger = get_logger(__name__)

KNOWN_KEYS: frozenset[str] = frozenset({"color", "newline", "root"})


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for antsi.

    Attributes:
        color (ColorMode): Color policy for rendered output.
        newline (bool): Whether CLI output ends with a newline.
        config_files (tuple[Path, ...]): Config files that contributed, in merge order.
    """

    color: ColorMode = ColorMode.AUTO
    newline: bool = True
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            color=self.color,
            newline=self.newline,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging."""

    color: ColorMode | None = None
    newline: bool | None = None
    root: bool = False
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling in defaults."""
        defaults: Config = Config()
        return Config(
            color=self.color if self.color is not None else defaults.color,
            newline=self.newline if self.newline is not None else defaults.newline,
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            color=other.color if other.color is not None else self.color,
            newline=other.newline if other.newline is not None else self.newline,
            root=other.root,
            config_files=[*self.config_files, *other.config_files],
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a settings table.

        Raises:
            ConfigError: If a value has the wrong type or is not recognized.
        """
        origin: str = str(config_file) if config_file is not None else "<settings>"
        for key in sorted(set(data) - KNOWN_KEYS):
            logger.warning("Ignoring unknown config key %r in %s", key, origin)

        draft = cls()
        raw_color: Any = data.get("color")
        if raw_color is not None:
            mode: ColorMode | None = (
                ColorMode.parse(raw_color) if isinstance(raw_color, str) else None
            )
            if mode is None:
                raise ConfigError(
                    f"Invalid value for 'color' in {origin}: {raw_color!r} "
                    f"(expected one of: {join_keys(ColorMode)})"
                )
            draft.color = mode

        raw_newline: Any = data.get("newline")
        if raw_newline is not None:
            if not isinstance(raw_newline, bool):
                raise ConfigError(f"Invalid value for 'newline' in {origin}: expected a boolean")
            draft.newline = raw_newline

        draft.root = bool(data.get("root", False))
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from a single TOML file.

        Returns:
            MutableConfig | None: The draft, or None for a ``pyproject.toml``
                without a ``[tool.antsi]`` table.

        Raises:
            ConfigError: If the file is unreadable or invalid.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        settings: TomlTable | None = extract_settings(path, load_toml_dict(path))
        if settings is None:
            logger.debug("No antsi settings in %s", path)
            return None
        return cls.from_toml_dict(settings, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned root-most first, nearest last, so a last-wins merge
        gives precedence to the nearest file. Within a directory
        ``pyproject.toml`` comes before ``antsi.toml``. A file setting
        ``root = true`` stops the walk after its directory.
        """
        found: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            here: list[Path] = []
            stop: bool = False
            for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                try:
                    draft: MutableConfig | None = cls.from_toml_file(p)
                except ConfigError as e:
                    # Surfaced again when the file is actually loaded.
                    logger.debug("Ignoring unreadable config %s during discovery: %s", p, e)
                    here.append(p)
                    continue
                if draft is None:
                    continue
                here.append(p)
                logger.debug("Discovered config file: %s", p)
                stop = stop or draft.root
            found.append(here)

            parent: Path = cur.parent
            if stop or parent == cur:
                if stop:
                    logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        return [p for group in reversed(found) for p in group]

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_files: Iterable[Path] = (),
        discover: bool = True,
    ) -> MutableConfig:
        """Merge discovered files and ``extra_files`` (in that order), last wins.

        Raises:
            ConfigError: If any contributing file is unreadable or invalid.
        """
        merged: MutableConfig = cls()
        paths: list[Path] = []
        if discover:
            paths.extend(cls.discover_local_config_files(start or Path(os.getcwd())))
        paths.extend(extra_files)

        for path in paths:
            if not path.is_file():
                raise ConfigError(f"Config file not found: {path}")
            draft: MutableConfig | None = cls.from_toml_file(path)
            if draft is not None:
                merged = merged.merge_with(draft)
        logger.debug("Merged config: %s", merged)
        return merged
