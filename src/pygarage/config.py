"""Garage configuration for pygarage."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pygarage._constants import DEFAULT_LEVELS, DEFAULT_SLOTS_PER_LEVEL
from pygarage.exceptions import GarageConfigError


def _env_int(env_key: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise GarageConfigError(f"{env_key} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class GarageConfig:
    """Garage dimensions.

    Both values are fixed for the lifetime of a
    :class:`~pygarage.engine.garage.Garage` built from this config.

    Parameters
    ----------
    levels : int
        Number of levels (floors). Must be positive.
    slots_per_level : int
        Number of slots on every level. Must be positive.
    """

    levels: int = DEFAULT_LEVELS
    slots_per_level: int = DEFAULT_SLOTS_PER_LEVEL

    def __post_init__(self) -> None:
        for field_name in ("levels", "slots_per_level"):
            value = getattr(self, field_name)
            # bool is an int subclass; reject it explicitly.
            if isinstance(value, bool) or not isinstance(value, int):
                raise GarageConfigError(f"{field_name} must be an integer, got {value!r}")
            if value <= 0:
                raise GarageConfigError(f"{field_name} must be positive, got {value}")

    @property
    def capacity(self) -> int:
        """Total number of slots across all levels."""
        return self.levels * self.slots_per_level

    @classmethod
    def from_env(cls, **overrides: Any) -> GarageConfig:
        """Create configuration from environment variables.

        Reads ``GARAGE_LEVELS`` and ``GARAGE_SLOTS_PER_LEVEL``. Explicit
        keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        GarageConfig
            Populated configuration.

        Raises
        ------
        GarageConfigError
            If an environment value is not a positive integer.
        """
        env = os.environ
        # None means "not given", so env vars and defaults still apply.
        overrides = {k: v for k, v in overrides.items() if v is not None}

        _ENV_CONFIG_MAP = {
            "GARAGE_LEVELS": "levels",
            "GARAGE_SLOTS_PER_LEVEL": "slots_per_level",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_int(env_key, val)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
