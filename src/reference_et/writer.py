"""
Result writer module.

Serializes computed evapotranspiration values to JSON.
"""

import json
import logging
import math
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .models import ModelKind


class ResultWriter:
    """Write evapotranspiration results as JSON."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize result writer.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def create_payload(
        results: Dict[int, float],
        kind: ModelKind,
        timestamp: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Build the JSON document for one timestep.

        Non-finite values are written as null, since JSON has no inf or NaN.

        Args:
            results: Station id -> ET
            kind: Model kind that produced the results
            timestamp: Timestep the results belong to

        Returns:
            Dictionary ready for json.dump
        """
        return {
            "model": kind.value,
            "unit": kind.output_unit,
            "timestamp": timestamp,
            "values": {
                str(station_id): value if math.isfinite(value) else None
                for station_id, value in sorted(results.items())
            },
        }

    def write(
        self,
        results: Dict[int, float],
        kind: ModelKind,
        timestamp: Optional[str] = None,
        output_file: Optional[str] = None
    ) -> None:
        """
        Write results to a file, or to stdout when no file is given.

        Args:
            results: Station id -> ET
            kind: Model kind that produced the results
            timestamp: Timestep the results belong to
            output_file: Destination path
        """
        payload = self.create_payload(results, kind, timestamp)

        non_finite = [k for k, v in payload["values"].items() if v is None]
        if non_finite:
            self.logger.warning(f"Non-finite ET for stations: {', '.join(non_finite)}")

        if output_file is None:
            json.dump(payload, sys.stdout, indent=2)
            sys.stdout.write("\n")
            return

        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)

        self.logger.info(f"Wrote {len(results)} values to {output_path}")
