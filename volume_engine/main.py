import sys
from pathlib import Path

from pydub import AudioSegment

from volume_engine.config import VolumeConfig
from volume_engine.dsp.gain import apply_slider_position
from volume_engine.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

USAGE = "Usage: python -m volume_engine.main <input_audio> <output_audio> <slider_position> [linear|logarithmic] [db_range]"


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 3:
        print(USAGE)
        print("Example: python -m volume_engine.main input.wav output/quiet.wav 0.4 logarithmic 50")
        sys.exit(1)

    setup_logging()

    input_path, output_path = args[0], args[1]
    slider_position = float(args[2])
    settings = {"volume": {"curve": args[3] if len(args) > 3 else None}}
    if len(args) > 4:
        settings["volume"]["db_range"] = float(args[4])

    config = VolumeConfig.from_settings(settings)
    transfer = config.build_transfer()

    logger.info(
        f"Applying slider {slider_position} ({config.curve.value}) -> "
        f"volume {float(transfer.slider_to_volume(slider_position)):.4f}"
    )
    audio = AudioSegment.from_file(input_path)
    result = apply_slider_position(audio, slider_position, transfer)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    result.export(str(output), format=output.suffix.lstrip(".") or "wav")
    logger.info(f"Written {output}")


if __name__ == "__main__":
    main()
