"""Top-level dddocs configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from .get_config_path import get_config_path
from .LogConfig import LogConfig
from .MarkdownConfig import MarkdownConfig
from .PwaConfig import PwaConfig
from .SiteSection import SiteSection


class SiteConfig(BaseModel):
    """Top-level configuration for the documentation site."""

    model_config = ConfigDict(extra="forbid")

    site: SiteSection
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    pwa: PwaConfig = Field(default_factory=PwaConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    _path: Path | None = PrivateAttr(default=None)

    @property
    def path(self) -> Path:
        """Path to the config file this instance was loaded from."""
        return self._path if self._path is not None else get_config_path()

    @property
    def base_dir(self) -> Path:
        """Directory that relative paths in the config are resolved against."""
        return self.path.parent

    def resolve_path(self, value: str) -> Path:
        """Resolve a config path value relative to the config file's directory."""
        path = Path(value).expanduser()
        return path if path.is_absolute() else (self.base_dir / path).resolve()

    @classmethod
    def load(cls, path: Path | None = None) -> "SiteConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = path or get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: expected a JSON object in {path}")

        try:
            config = cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

        config._path = path.resolve()
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert SiteConfig instance to a dictionary for serialization."""
        return {
            "site": self.site.model_dump(),
            "markdown": self.markdown.model_dump(),
            "pwa": self.pwa.model_dump(),
            "log": self.log.model_dump(),
        }
