"""
Result Export

Writes the sorted odd sequence, the sorted even sequence and the seat grid
to comma separated text files.
"""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from .pipeline import PipelineResult
from .seating import SeatMap

logger = logging.getLogger(__name__)


@dataclass
class ExportPaths:
    """Locations of the three exported files"""
    odd: Path
    even: Path
    seat_map: Path


class SeatMapExporter:
    """Exports sorted sequences and seat maps to CSV"""

    def __init__(self, lineterminator: str = "\n"):
        self.lineterminator = lineterminator

    def _prepare(self, output_path: Union[str, Path]) -> Path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        return output_file

    def export_sequence(self, values: Sequence[int], output_path: Union[str, Path]) -> Path:
        """Write values on a single comma separated line (empty file if no values)"""
        output_file = self._prepare(output_path)

        with open(output_file, 'w', newline='') as f:
            writer = csv.writer(f, lineterminator=self.lineterminator)
            if len(values):
                writer.writerow([int(v) for v in values])

        return output_file

    def export_seat_map(self, seat_map: SeatMap, output_path: Union[str, Path]) -> Path:
        """Write one line per grid row, 0 marking empty seats"""
        output_file = self._prepare(output_path)

        with open(output_file, 'w', newline='') as f:
            writer = csv.writer(f, lineterminator=self.lineterminator)
            writer.writerows(seat_map.to_rows())

        return output_file

    def export_all(self,
                   odd: Sequence[int],
                   even: Sequence[int],
                   seat_map: SeatMap,
                   odd_path: Union[str, Path],
                   even_path: Union[str, Path],
                   seat_path: Union[str, Path]) -> ExportPaths:
        paths = ExportPaths(
            odd=self.export_sequence(odd, odd_path),
            even=self.export_sequence(even, even_path),
            seat_map=self.export_seat_map(seat_map, seat_path)
        )
        logger.info("Exported %s / %s / %s", paths.odd, paths.even, paths.seat_map)
        return paths


def export_results(result: PipelineResult,
                   output_dir: Union[str, Path] = "output",
                   odd_file: str = "odd.csv",
                   even_file: str = "even.csv",
                   seat_file: str = "seat_map.csv",
                   prefix: Optional[str] = None) -> ExportPaths:
    """
    Convenience function exporting a pipeline result

    Args:
        result: Pipeline result to export
        output_dir: Directory receiving the files
        odd_file / even_file / seat_file: File names inside output_dir
        prefix: Optional prefix prepended to every file name

    Returns:
        ExportPaths of the written files
    """
    output_dir = Path(output_dir)
    if prefix:
        odd_file, even_file, seat_file = (f"{prefix}_{name}" for name in (odd_file, even_file, seat_file))

    exporter = SeatMapExporter()
    return exporter.export_all(
        result.odd, result.even, result.seat_map,
        output_dir / odd_file, output_dir / even_file, output_dir / seat_file
    )
