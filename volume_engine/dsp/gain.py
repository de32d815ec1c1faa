"""
Apply player volume levels to audio.
"""
import array
import math

import numpy as np
from pydub import AudioSegment

from volume_engine.dsp.volume_transfer import VolumeTransfer
from volume_engine.utils.logger import get_logger, log_performance

logger = get_logger(__name__)

# sample_width -> (array typecode, min, max); pydub widens 24-bit audio to 4 bytes
SAMPLE_FORMATS = {
    1: ('b', -128, 127),
    2: ('h', -32768, 32767),
    4: ('i', -2147483648, 2147483647),
}


def volume_to_db(volume: float) -> float:
    """
    Convert a linear volume level to a gain in dB.
    0.0 (or below) is -inf dB.
    """
    if volume <= 0.0:
        return float("-inf")
    return 20.0 * math.log10(volume)


def db_to_volume(db: float) -> float:
    """
    Convert a gain in dB to a linear volume level.
    """
    return 10.0 ** (db / 20.0)


def _silence_like(audio: AudioSegment) -> AudioSegment:
    return audio._spawn(data=b"\x00" * len(audio.raw_data))


def apply_volume(audio: AudioSegment, volume: float) -> AudioSegment:
    """
    Scale audio by a player volume level.

    Args:
        audio: Audio segment to scale
        volume: Volume from 0.0-1.0 (clamped, audio is never boosted)

    Returns:
        Scaled audio segment
    """
    # NaN (e.g. from a NaN slider) plays as silence, not full volume
    if math.isnan(volume):
        volume = 0.0
    volume = max(0.0, min(1.0, volume))

    if volume == 0.0:
        return _silence_like(audio)

    gain_db = volume_to_db(volume)
    logger.debug(f"Applying volume {volume:.4f} ({gain_db:.2f} dB)")
    return audio.apply_gain(gain_db)


def apply_slider_position(
    audio: AudioSegment,
    slider_position: float,
    transfer: VolumeTransfer
) -> AudioSegment:
    """
    Scale audio by the volume a slider position maps to.

    Args:
        audio: Audio segment to scale
        slider_position: Slider position from 0.0-1.0
        transfer: Transfer function mapping slider to volume

    Returns:
        Scaled audio segment
    """
    volume = float(transfer.slider_to_volume(slider_position))
    return apply_volume(audio, volume)


@log_performance
def apply_volume_ramp(
    audio: AudioSegment,
    start_slider: float,
    end_slider: float,
    transfer: VolumeTransfer
) -> AudioSegment:
    """
    Sweep the slider linearly across the segment, letting the volume
    follow the transfer curve.

    Args:
        audio: Audio segment to process
        start_slider: Slider position at the first frame
        end_slider: Slider position at the last frame
        transfer: Transfer function mapping slider to volume

    Returns:
        Audio segment with the ramp applied, same length and format
    """
    num_frames = int(audio.frame_count())
    if num_frames == 0:
        return audio

    array_type, min_val, max_val = SAMPLE_FORMATS[audio.sample_width]

    sliders = np.linspace(start_slider, end_slider, num_frames)
    gains = np.asarray(transfer.slider_to_volume(sliders), dtype=np.float64)
    gains = np.clip(np.nan_to_num(gains, nan=0.0), 0.0, 1.0)

    samples = np.array(audio.get_array_of_samples(), dtype=np.float64)
    samples = samples.reshape((-1, audio.channels))

    # Same gain on every channel of a frame
    samples = np.round(samples * gains[:, np.newaxis])
    samples = np.clip(samples, min_val, max_val).astype(np.int64).flatten()

    result_array = array.array(array_type, samples.tolist())

    return audio._spawn(
        data=result_array.tobytes(),
        overrides={
            "sample_width": audio.sample_width,
            "frame_rate": audio.frame_rate,
            "channels": audio.channels
        }
    )
