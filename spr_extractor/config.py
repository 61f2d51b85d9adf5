"""
Runtime configuration for the extractor
Defaults, environment overrides and command-line overlays
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .constants import ENV_DEBUG, ENV_OUTPUT_DIR, MAX_OUTPUT_NAME_LENGTH


@dataclass(frozen=True)
class ExtractorConfig:
    """Settings shared by one extraction run"""

    output_dir: Path | None = None
    planar: bool = False
    max_name_length: int = MAX_OUTPUT_NAME_LENGTH
    log_level: str = "INFO"
    log_file: str | None = None

    def __post_init__(self) -> None:
        if self.max_name_length <= 0:
            raise ValueError(
                f"max_name_length must be positive, got {self.max_name_length}"
            )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ExtractorConfig:
        """Build a config from SPR_EXTRACTOR_* environment variables."""
        if environ is None:
            environ = dict(os.environ)

        kwargs: dict[str, Any] = {}
        if environ.get(ENV_DEBUG, "").lower() in ("1", "true", "yes"):
            kwargs["log_level"] = "DEBUG"
        output_dir = environ.get(ENV_OUTPUT_DIR)
        if output_dir:
            kwargs["output_dir"] = Path(output_dir)
        return cls(**kwargs)

    def merged(self, **overrides: Any) -> ExtractorConfig:
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def output_dir_for(self, archive_path: str | Path) -> Path:
        """Directory pixmaps for the given archive are written to."""
        if self.output_dir is not None:
            return Path(self.output_dir)
        return Path(archive_path).parent
