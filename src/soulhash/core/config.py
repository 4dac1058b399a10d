"""Hasher configuration persistence.

Reads overrides for the file-extension allow-list and the auto-detection
markers from a JSON file.  Every field defaults to the constants in
:mod:`soulhash.core.defaults`, and a missing file means "use defaults".

Typical file::

    {
      "code_extensions": ["py", "ts", "kt"],
      "auto_detect_markers": ["def ", "class ", "import "]
    }

Usage::

    from soulhash.core.config import HasherConfig

    cfg = HasherConfig.load("soulhash.json")
    hash_file(path, True, code_extensions=cfg.code_extensions)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from soulhash.core.defaults import AUTO_DETECT_MARKERS, CODE_EXTENSIONS

logger = logging.getLogger(__name__)


class HasherConfig(BaseModel, frozen=True):
    """Tunable inputs to file gating and mode detection.

    Changing either field changes which algorithm some inputs are routed
    to, so any cache keyed on the resulting hashes should also be keyed on
    the config in use (see :func:`~soulhash.hasher.files.hash_object`).
    """

    code_extensions: frozenset[str] = Field(default=CODE_EXTENSIONS)
    auto_detect_markers: tuple[str, ...] = Field(default=AUTO_DETECT_MARKERS, min_length=1)

    @field_validator("code_extensions", mode="before")
    @classmethod
    def _strip_dots(cls, value: object) -> object:
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(ext).lstrip(".") for ext in value)
        return value

    @classmethod
    def load(cls, path: Path | str) -> HasherConfig:
        """Read *path*, or return the defaults when it does not exist.

        Raises:
            ValueError: If the path exists but cannot be read (a directory,
                no permission), is not valid JSON, or does not match the
                config schema.
        """
        config_path = Path(path)
        if not config_path.exists():
            logger.debug("No config at %s, using defaults", config_path)
            return cls()
        try:
            data = json.loads(config_path.read_text("utf-8"))
            return cls.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            raise ValueError(f"Invalid config at {config_path}: {exc}") from exc

    def as_dict(self) -> dict[str, list[str]]:
        return {
            "code_extensions": sorted(self.code_extensions),
            "auto_detect_markers": list(self.auto_detect_markers),
        }
