"""Default configuration for loading and validating show files.

The module-level variables hold the defaults. `LoaderConfiguration` collects
the settings of a single loader and can be overridden from JSON objects or
from environment variables (``SKYC_MAX_DRONE_COUNT`` and ``SKYC_LOAD_ASSETS``).
"""

import os

from typing import Any, Dict, Mapping, Optional, TypeVar

from .constants import MAX_DRONE_COUNT as DEFAULT_MAX_DRONE_COUNT

__all__ = ("LOAD_ASSETS", "LoaderConfiguration", "MAX_DRONE_COUNT")


# Maximum number of drones allowed in a single show
MAX_DRONE_COUNT = DEFAULT_MAX_DRONE_COUNT

# Whether to load binary assets (audio etc) from compiled show files
LOAD_ASSETS = False

# Prefix of the environment variables that override the defaults
ENV_PREFIX = "SKYC_"


C = TypeVar("C", bound="LoaderConfiguration")


def _parse_bool(value: str) -> bool:
    value = value.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    elif value in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"invalid boolean value: {value!r}")


class LoaderConfiguration:
    """Configuration object of the show loader."""

    load_assets: bool
    """Whether to load binary assets from compiled show files. When false,
    assets are replaced by placeholders.
    """

    max_drone_count: int
    """Maximum number of drones allowed in a single show."""

    def __init__(
        self, *, load_assets: Optional[bool] = None, max_drone_count: Optional[int] = None
    ):
        """Constructor."""
        self.load_assets = LOAD_ASSETS if load_assets is None else bool(load_assets)
        self.max_drone_count = (
            MAX_DRONE_COUNT if max_drone_count is None else int(max_drone_count)
        )
        self._check()

    @classmethod
    def from_environment(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "LoaderConfiguration":
        """Creates a configuration object from the defaults, overridden by
        the ``SKYC_*`` environment variables.

        Raises:
            ValueError: if an environment variable has an invalid value
        """
        environ = os.environ if environ is None else environ
        result = cls()

        value = environ.get(f"{ENV_PREFIX}MAX_DRONE_COUNT")
        if value is not None:
            result.max_drone_count = int(value)

        value = environ.get(f"{ENV_PREFIX}LOAD_ASSETS")
        if value is not None:
            result.load_assets = _parse_bool(value)

        result._check()
        return result

    def clone(self: C) -> C:
        """Makes an exact copy of the configuration object."""
        result = self.__class__()
        result.update_from_json(self.json)
        return result

    @property
    def json(self) -> Dict[str, Any]:
        """Returns the JSON representation of the configuration object."""
        return {"assets": self.load_assets, "maxDroneCount": self.max_drone_count}

    def update_from_json(self, obj: Dict[str, Any]) -> None:
        """Updates the configuration object from its JSON representation.
        Missing keys leave the corresponding settings intact.
        """
        if "assets" in obj:
            self.load_assets = bool(obj["assets"])

        if "maxDroneCount" in obj:
            self.max_drone_count = int(obj["maxDroneCount"])

        self._check()

    def _check(self) -> None:
        if self.max_drone_count <= 0:
            raise ValueError("maximum drone count must be positive")
