"""
Tests for the command-line entry point.
"""
import pytest
from pydub import AudioSegment
from pydub.generators import Sine

from volume_engine import main as cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda: None)


def test_usage_without_arguments(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 1
    assert "Usage" in capsys.readouterr().out


def test_applies_slider_to_file(tmp_path):
    input_path = tmp_path / "tone.wav"
    output_path = tmp_path / "out" / "quiet.wav"
    Sine(440).to_audio_segment(duration=500, volume=-6.0).export(str(input_path), format="wav")

    cli.main([str(input_path), str(output_path), "0.5", "logarithmic", "40"])

    original = AudioSegment.from_file(str(input_path))
    result = AudioSegment.from_file(str(output_path))
    assert len(result) == len(original)
    # Slider 0.5 over 40 dB is about -21 dB
    assert result.max_dBFS == pytest.approx(original.max_dBFS - 20.83, abs=0.2)


def test_linear_is_default_curve(tmp_path):
    input_path = tmp_path / "tone.wav"
    output_path = tmp_path / "half.wav"
    Sine(440).to_audio_segment(duration=500, volume=-6.0).export(str(input_path), format="wav")

    cli.main([str(input_path), str(output_path), "0.5"])

    original = AudioSegment.from_file(str(input_path))
    result = AudioSegment.from_file(str(output_path))
    assert result.max_dBFS == pytest.approx(original.max_dBFS - 6.02, abs=0.1)
