"""Application settings.

``Settings`` is built once at process start (by the CLI group or by
``create_app``) and handed to the composition root.  Nothing reads the
environment after that.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


@dataclass(frozen=True)
class Settings:
    """Configuration for one running process."""

    data_dir: Path = Path("data")
    log_level: str = "INFO"
    environment: str = "development"
    api_title: str = "Event Management API"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Read settings from environment variables, falling back to defaults.

        ``EVENTMGMT_DATA_DIR``  directory holding the JSON store
        ``LOG_LEVEL``           logging level name
        ``ENVIRONMENT``         ``development``, ``staging`` or ``production``
        """
        env = os.environ if environ is None else environ
        return cls(
            data_dir=Path(env.get("EVENTMGMT_DATA_DIR", str(cls.data_dir))),
            log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
            environment=env.get("ENVIRONMENT", cls.environment).lower(),
            api_title=env.get("EVENTMGMT_API_TITLE", cls.api_title),
        )

    @property
    def is_production(self) -> bool:
        return self.environment in {"production", "staging"}
