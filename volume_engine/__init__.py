"""
Slider-to-volume transfer functions and gain helpers.
"""
from volume_engine.config import VolumeConfig
from volume_engine.dsp.volume_transfer import (
    LinearVolumeTransfer,
    LogarithmicVolumeTransfer,
    VolumeCurve,
    VolumeTransfer,
    create_volume_transfer,
)

__all__ = [
    'VolumeConfig',
    'LinearVolumeTransfer',
    'LogarithmicVolumeTransfer',
    'VolumeCurve',
    'VolumeTransfer',
    'create_volume_transfer',
]
