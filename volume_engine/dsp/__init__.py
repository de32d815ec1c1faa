# DSP Module exports
from volume_engine.dsp.volume_transfer import (
    DEFAULT_DB_RANGE,
    LinearVolumeTransfer,
    LogarithmicVolumeTransfer,
    VolumeCurve,
    VolumeTransfer,
    create_volume_transfer,
    generate_volume_curve,
)
from volume_engine.dsp.gain import (
    apply_slider_position,
    apply_volume,
    apply_volume_ramp,
    db_to_volume,
    volume_to_db,
)
