"""Collaborator configuration for pyrecords."""

from __future__ import annotations

import dataclasses
import os
from typing import Any


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class RecordsConfig:
    """Settings for the persistence and reporting collaborators.

    The core store and index take no configuration; these values only
    steer where the collaborators read and write.

    Parameters
    ----------
    snapshot_path : str
        JSON file used to save and reload a store's contents.
    snapshot_indent : int
        Indentation of the JSON snapshot. ``0`` writes compact JSON.
    scores_path : str
        Comma-separated score file read by the grading collaborator.
    report_path : str
        Text file the grading report is written to.
    verbose : bool
        Enable DEBUG logging in the demo CLI.
    """

    snapshot_path: str = "inventory.json"
    snapshot_indent: int = 2
    scores_path: str = "students.txt"
    report_path: str = "report.txt"
    verbose: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> RecordsConfig:
        """Create configuration from ``PYRECORDS_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PYRECORDS_SNAPSHOT_PATH": "snapshot_path",
            "PYRECORDS_SCORES_PATH": "scores_path",
            "PYRECORDS_REPORT_PATH": "report_path",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        indent_env = env.get("PYRECORDS_SNAPSHOT_INDENT")
        if indent_env is not None and "snapshot_indent" not in overrides:
            config_kwargs["snapshot_indent"] = int(indent_env)

        if "verbose" not in overrides:
            config_kwargs["verbose"] = _env_bool(env.get("PYRECORDS_VERBOSE"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
