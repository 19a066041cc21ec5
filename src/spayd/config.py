"""
Runtime configuration for spayd command-line and batch tooling.

Defines SpaydSettings, a frozen dataclass carrying the policy knobs that sit on top
of the pure core: whether a checksum must be present, whether version-mandated
fields are enforced, and whether output is signed with a fresh CRC32.

Source of truth
- The core itself never reads configuration; callers pass these values explicitly.

Notes
- Precedence is environment (SPAYD_*) > TOML > defaults.
- TOML search order when no path is given: ./spayd.toml ([spayd] table or top-level
  keys), then ./pyproject.toml under [tool.spayd].
- Invalid values raise ConfigError instead of being silently ignored.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from spayd.core.errors import SpaydError

__all__ = ["ConfigError", "SpaydSettings"]

_TRUE = {"1", "true", "t", "yes", "y", "on"}
_FALSE = {"0", "false", "f", "no", "n", "off"}
_BOOL_KEYS = ("require_checksum", "validate_required", "sign_output")


class ConfigError(SpaydError):
    """Raised when a configuration value is invalid or of the wrong type."""


def _bool(key: str, v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, int):
        return bool(v)
    if isinstance(v, str):
        lo = v.strip().lower()
        if lo in _TRUE:
            return True
        if lo in _FALSE:
            return False
    raise ConfigError(f"{key} must be a boolean, got {v!r}")


@dataclass(frozen=True)
class SpaydSettings:
    """
    Policy settings for spayd tooling.

    Attributes:
        require_checksum (bool): If True, a missing CRC32 field is a failure.
        validate_required (bool): If True, enforce fields mandated by the header version.
        sign_output (bool): If True, emitted descriptors carry a freshly computed CRC32.

    Examples:
        >>> from spayd.config import SpaydSettings
        >>> SpaydSettings(require_checksum=True).validate_required
        True
    """

    require_checksum: bool = False
    validate_required: bool = True
    sign_output: bool = False

    @classmethod
    def _apply_mapping(cls, base: SpaydSettings, cfg: dict[str, Any] | None) -> SpaydSettings:
        """Apply a loose config mapping onto SpaydSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        for key in _BOOL_KEYS:
            if key in cfg:
                s = replace(s, **{key: _bool(key, cfg[key])})

        return s

    @classmethod
    def from_env(cls, base: SpaydSettings | None = None, prefix: str = "SPAYD_") -> SpaydSettings:
        """
        Build SpaydSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - SPAYD_REQUIRE_CHECKSUM (1/0/true/false/yes/no/on/off)
            - SPAYD_VALIDATE_REQUIRED
            - SPAYD_SIGN_OUTPUT
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for key in _BOOL_KEYS:
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> SpaydSettings:
        """
        Build SpaydSettings from a TOML file.

        Returns defaults if no candidate file exists.

        Raises:
            ConfigError: If a file exists but is not valid TOML, or holds invalid values.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "spayd.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{p}: {exc}") from exc
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("spayd") if isinstance(tool, dict) else None
            elif isinstance(data.get("spayd"), dict):
                cfg = data["spayd"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> SpaydSettings:
        """
        Load SpaydSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search spayd.toml then pyproject.toml.
        """
        s = cls.from_toml(path)
        return cls.from_env(base=s)
