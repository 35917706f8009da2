"""Engine settings loaded from a YAML file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Collection, Mapping

import yaml

from chromarole.core.optimizer import TARGET_STANDARDS
from chromarole.core.roles import CONTEXTS
from chromarole.errors import ChromaRoleError, ErrorCode
from chromarole.themes.constants import ACCESSIBILITY_LEVELS, STYLES

CONFIG_ENV_VAR = "CHROMAROLE_CONFIG"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def default_settings_path() -> Path:
    """Resolve the settings file from the environment or the user config dir."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "chromarole" / "settings.yaml"


def _choice(raw: object, allowed: Collection[str], default: str, *, upper: bool = False) -> str:
    value = str(raw or "").strip()
    value = value.upper() if upper else value.lower()
    return value if value in allowed else default


def _flag(raw: object, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in {"true", "yes", "on", "1"}:
            return True
        if lowered in {"false", "no", "off", "0"}:
            return False
    return default


class EngineSettings:
    """Wraps a settings mapping with sanitized, defaulted properties."""

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    # -- accessibility --

    @property
    def accessibility_level(self) -> str:
        return _choice(
            self._data.get("accessibility_level"), ACCESSIBILITY_LEVELS, "AA", upper=True
        )

    @accessibility_level.setter
    def accessibility_level(self, value: str) -> None:
        self._data["accessibility_level"] = _choice(
            value, ACCESSIBILITY_LEVELS, "AA", upper=True
        )

    @property
    def ensure_contrast(self) -> bool:
        return _flag(self._data.get("ensure_contrast"), True)

    @ensure_contrast.setter
    def ensure_contrast(self, value: bool) -> None:
        self._data["ensure_contrast"] = bool(value)

    @property
    def target_standard(self) -> str:
        return _choice(
            self._data.get("target_standard"), TARGET_STANDARDS, "WCAG_AA", upper=True
        )

    @property
    def preserve_hue(self) -> bool:
        return _flag(self._data.get("preserve_hue"), True)

    # -- composition --

    @property
    def context(self) -> str:
        return _choice(self._data.get("context"), CONTEXTS, "web")

    @context.setter
    def context(self, value: str) -> None:
        self._data["context"] = _choice(value, CONTEXTS, "web")

    @property
    def style(self) -> str:
        return _choice(self._data.get("style"), STYLES, "material")

    @style.setter
    def style(self, value: str) -> None:
        self._data["style"] = _choice(value, STYLES, "material")

    # -- logging --

    @property
    def log_level(self) -> str:
        return _choice(self._data.get("log_level"), _LOG_LEVELS, "INFO", upper=True)

    @property
    def log_file(self) -> Path | None:
        raw = self._data.get("log_file")
        if not isinstance(raw, str) or not raw.strip():
            return None
        return Path(raw.strip()).expanduser()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "accessibility_level": self.accessibility_level,
            "ensure_contrast": self.ensure_contrast,
            "target_standard": self.target_standard,
            "preserve_hue": self.preserve_hue,
            "context": self.context,
            "style": self.style,
            "log_level": self.log_level,
        }
        if self.log_file is not None:
            data["log_file"] = str(self.log_file)
        return data

    def save(self, path: Path) -> Path:
        """Write the sanitized settings as YAML and return the path."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(self.to_dict(), default_flow_style=False), encoding="utf-8")
        return path


def load_settings(path: Path | None = None, *, required: bool = False) -> EngineSettings:
    """Load settings from *path*, falling back to defaults when it is absent."""
    path = path or default_settings_path()
    if not path.exists():
        if required:
            raise ChromaRoleError(ErrorCode.CONFIG_MISSING, details={"path": str(path)})
        return EngineSettings()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ChromaRoleError(
            ErrorCode.CONFIG_INVALID,
            message=f"Unable to read settings from {path}: {exc}",
            details={"path": str(path)},
        ) from exc
    if data is None:
        return EngineSettings()
    if not isinstance(data, dict):
        raise ChromaRoleError(
            ErrorCode.CONFIG_INVALID,
            message=f"Expected a YAML mapping in {path}",
            details={"path": str(path)},
        )
    return EngineSettings(data)
