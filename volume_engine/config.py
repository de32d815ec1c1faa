"""
Configuration dataclass for volume settings.
"""
from dataclasses import dataclass
from typing import Any, Dict
import numbers

from volume_engine.dsp.volume_transfer import (
    DEFAULT_DB_RANGE,
    VolumeCurve,
    VolumeTransfer,
    create_volume_transfer,
)
from volume_engine.exceptions import ConfigurationError


@dataclass
class VolumeConfig:
    """Configuration for slider-to-volume scaling."""
    curve: VolumeCurve = VolumeCurve.LINEAR
    db_range: float = DEFAULT_DB_RANGE

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> 'VolumeConfig':
        """Create VolumeConfig from the "volume" section of a settings dictionary."""
        volume_cfg = settings.get("volume") or {}
        if not isinstance(volume_cfg, dict):
            raise ConfigurationError(
                f"'volume' settings must be a mapping, got {type(volume_cfg).__name__}"
            )

        db_range = volume_cfg.get("db_range", DEFAULT_DB_RANGE)
        if isinstance(db_range, bool) or not isinstance(db_range, numbers.Real):
            raise ConfigurationError(f"'db_range' must be a number, got {db_range!r}")

        return cls(
            curve=VolumeCurve.from_string(volume_cfg.get("curve")),
            db_range=float(db_range),
        )

    def build_transfer(self) -> VolumeTransfer:
        """Create the transfer function these settings describe."""
        return create_volume_transfer(self.curve, self.db_range)
