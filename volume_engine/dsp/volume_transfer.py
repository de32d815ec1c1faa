"""
Volume transfer functions: convert between slider position (UI space) and
player volume (audio space).

A linear transfer maps the slider straight onto the volume. A logarithmic
transfer spreads a fixed decibel range across the slider travel, which
matches how loudness is perceived: equal slider steps near the bottom give
proportionally smaller volume changes.

Both variants accept Python floats or numpy arrays and work element-wise.
Scalar input gives a plain float back, array input an array.
Inputs outside 0.0-1.0 are extrapolated, never clamped.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Union, runtime_checkable
import math

import numpy as np

from volume_engine.exceptions import VolumeTransferError
from volume_engine.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_DB_RANGE = 50.0

Number = Union[float, np.ndarray]


class VolumeCurve(Enum):
    """Enumeration of available volume scaling curves."""
    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"

    @classmethod
    def from_string(cls, curve_str: Union[str, None]) -> 'VolumeCurve':
        """
        Convert string to VolumeCurve enum, defaulting to LINEAR if None or invalid.

        Args:
            curve_str: String representation of curve type

        Returns:
            VolumeCurve enum value, defaults to LINEAR
        """
        if curve_str is None:
            return cls.LINEAR

        curve_str_lower = curve_str.lower().strip()
        for curve in cls:
            if curve.value == curve_str_lower:
                return curve

        logger.warning(f"Unknown volume curve '{curve_str}', falling back to linear")
        return cls.LINEAR


def _as_number(result: np.ndarray) -> Number:
    """Scalars come back as plain floats, arrays stay arrays."""
    if np.ndim(result) == 0:
        return float(result)
    return result


@runtime_checkable
class VolumeTransfer(Protocol):
    """Conversion between slider position and player volume."""

    def slider_to_volume(self, slider_position: Number) -> Number:
        """
        Convert slider position to player volume.

        Args:
            slider_position: Slider position from 0.0-1.0

        Returns:
            Player volume from 0.0-1.0
        """
        ...

    def volume_to_slider(self, volume: Number) -> Number:
        """
        Convert player volume to slider position.

        Args:
            volume: Player volume from 0.0-1.0

        Returns:
            Slider position from 0.0-1.0
        """
        ...


@dataclass(frozen=True)
class LinearVolumeTransfer:
    """Direct 1:1 mapping between slider and volume."""

    def slider_to_volume(self, slider_position: Number) -> Number:
        return slider_position

    def volume_to_slider(self, volume: Number) -> Number:
        return volume


@dataclass(frozen=True)
class LogarithmicVolumeTransfer:
    """
    Decibel-scaled volume transfer.

    The slider spans ``db_range`` decibels: slider 1.0 is 0 dB and slider
    0.0 is ``-db_range`` dB. The raw curve ``10^(dB/20)`` bottoms out at
    ``offset`` rather than zero, so it is shifted down by ``offset`` and
    stretched back to 1.0. Slider 0.0 is then exactly silent and slider
    1.0 exactly full volume.

    Args:
        db_range: Decibel range covered by the slider. Larger values create
            a more dramatic curve. Typical range: 40-60 dB.
    """
    db_range: float = DEFAULT_DB_RANGE
    offset: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        try:
            db_range = float(self.db_range)
        except (TypeError, ValueError) as e:
            raise VolumeTransferError(f"db_range must be a number, got {self.db_range!r}") from e

        if not math.isfinite(db_range) or db_range <= 0:
            raise VolumeTransferError(f"db_range must be a positive finite number, got {db_range}")

        # Frozen dataclass: fields are fixed through object.__setattr__
        object.__setattr__(self, "db_range", db_range)
        object.__setattr__(self, "offset", float(np.power(10.0, -db_range / 20)))
        logger.debug(f"Logarithmic volume transfer: {db_range} dB range, offset {self.offset:.6g}")

    def slider_to_volume(self, slider_position: Number) -> Number:
        # Far above the range the gain overflows to inf
        with np.errstate(over="ignore"):
            gain = np.power(10.0, (np.asarray(slider_position, dtype=np.float64) - 1) * self.db_range / 20)
        return _as_number((gain - self.offset) / (1.0 - self.offset))

    def volume_to_slider(self, volume: Number) -> Number:
        gain = np.asarray(volume, dtype=np.float64) * (1.0 - self.offset) + self.offset
        # Volumes below -offset/(1-offset) have no real slider position: NaN
        with np.errstate(divide="ignore", invalid="ignore"):
            slider = 1.0 + 20.0 * np.log10(gain) / self.db_range
        return _as_number(slider)


def create_volume_transfer(
    curve: Union[VolumeCurve, str, None] = VolumeCurve.LINEAR,
    db_range: float = DEFAULT_DB_RANGE
) -> VolumeTransfer:
    """
    Build the transfer function for a curve.

    Args:
        curve: VolumeCurve or its string name
        db_range: Decibel range for the logarithmic curve (ignored for linear)

    Returns:
        Transfer function instance
    """
    if not isinstance(curve, VolumeCurve):
        curve = VolumeCurve.from_string(curve)

    if curve == VolumeCurve.LOGARITHMIC:
        return LogarithmicVolumeTransfer(db_range)
    return LinearVolumeTransfer()


def generate_volume_curve(transfer: VolumeTransfer, num_points: int) -> np.ndarray:
    """
    Sample slider_to_volume at evenly spaced slider positions from 0.0 to 1.0.

    Args:
        transfer: Transfer function to sample
        num_points: Number of sample points

    Returns:
        Array of volumes, one per slider position
    """
    if num_points <= 0:
        return np.array([])

    sliders = np.linspace(0.0, 1.0, num_points)
    return np.asarray(transfer.slider_to_volume(sliders), dtype=np.float64)
