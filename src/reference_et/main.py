"""
Main entry point for reference evapotranspiration estimation.

Reads station series from a JSON file, computes one timestep and writes the
result as JSON.
"""

import json
import math
import sys
from pathlib import Path
from typing import Dict, Optional

from .core import Config, setup_logger, LoggerContext
from .core.exceptions import PreconditionError
from .models import ModelKind, VariableSeries
from .processor import EtpProcessor
from .writer import ResultWriter


def load_inputs(inputs_file: str) -> Dict[str, VariableSeries]:
    """
    Load station series from a JSON file.

    The file maps variable names to ``{station_id: value}`` objects. A value
    may also be a one-element list, in which case only the first element is used,
    or null, which is read as a missing observation.

    Args:
        inputs_file: Path to the inputs JSON file

    Returns:
        Variable name -> {station id: value}

    Raises:
        PreconditionError: If the file content is not shaped as described
    """
    with open(Path(inputs_file), "r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise PreconditionError("Inputs file must contain a JSON object")

    series = {}
    for name, stations in raw.items():
        if not isinstance(stations, dict):
            raise PreconditionError(f"Series {name!r} must be a JSON object")

        values = {}
        for station_id, value in stations.items():
            if isinstance(value, list):
                if not value:
                    raise PreconditionError(f"Empty value for station {station_id} in {name!r}")
                value = value[0]
            if value is None:
                value = math.nan
            try:
                key, number = int(station_id), float(value)
            except (TypeError, ValueError) as e:
                raise PreconditionError(
                    f"Invalid entry {station_id!r}: {value!r} in series {name!r}"
                ) from e
            if key in values:
                raise PreconditionError(
                    f"Duplicate station {key} in series {name!r}"
                )
            values[key] = number
        series[name] = values

    return series


class EtpApp:
    """Command line application computing one timestep."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_file=self.config.log_file,
            log_level=self.config.log_level
        )
        self.logger.info(f"Configuration: {self.config}")

        self.processor = EtpProcessor(config=self.config, logger=self.logger)
        self.writer = ResultWriter(logger=self.logger)

    def run(
        self,
        kind: ModelKind,
        inputs_file: str,
        timestamp: Optional[str] = None,
        output_file: Optional[str] = None
    ) -> Dict[int, float]:
        """
        Compute and write ET for one timestep.

        Args:
            kind: Model kind
            inputs_file: Path to the inputs JSON file
            timestamp: Current timestep
            output_file: Destination path (stdout when None)

        Returns:
            Station id -> ET
        """
        try:
            with LoggerContext(self.logger, f"loading {inputs_file}"):
                series = load_inputs(inputs_file)

            results = self.processor.process(kind, series, timestamp=timestamp)
            self.logger.info(f"Computed {kind.value} for {len(results)} stations")

            self.writer.write(results, kind, timestamp=timestamp, output_file=output_file)
            return results

        except Exception as e:
            self.logger.error(f"Application error: {e}", exc_info=True)
            raise


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Reference evapotranspiration for a set of stations"
    )
    parser.add_argument(
        "--model",
        type=str,
        required=True,
        choices=[kind.value for kind in ModelKind],
        help="Model variant"
    )
    parser.add_argument(
        "--inputs",
        type=str,
        required=True,
        help="Path to the station series JSON file"
    )
    parser.add_argument(
        "--time",
        type=str,
        default=None,
        help="Current timestep (YYYYMMDDHHmm, UTC). Required for pt_hourly"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file. Default: stdout"
    )

    args = parser.parse_args(argv)

    try:
        app = EtpApp(config_file=args.config)
        app.run(
            kind=ModelKind(args.model),
            inputs_file=args.inputs,
            timestamp=args.time,
            output_file=args.output
        )
    except Exception as e:
        print(f"Application failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
