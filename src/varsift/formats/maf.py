"""MAF (Mutation Annotation Format) writer.

Writes MAFRecord rows as tab-separated text with a header row, and merges
existing MAF files produced by earlier runs.
"""

import csv
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from varsift.models.maf import MAFRecord

logger = logging.getLogger(__name__)


class MAFWriteError(Exception):
    """Exception raised when MAF output cannot be written or merged."""

    pass


class MAFWriter:
    """Tab-separated MAF writer.

    The header row is written when the file is opened, so an empty run still
    produces a valid MAF file. Use with ``with`` to guarantee the file is closed.
    """

    def __init__(self, output_path: str | Path) -> None:
        """Open the output file and write the header.

        Args:
            output_path: Destination MAF path

        Raises:
            MAFWriteError: If the file cannot be created
        """
        self.output_path = Path(output_path)
        self._records_written = 0

        try:
            self._file = open(self.output_path, "w", newline="")
        except OSError as e:
            raise MAFWriteError(f"Failed to create output file: {self.output_path}: {e}") from e

        self._writer = csv.DictWriter(
            self._file,
            fieldnames=MAFRecord.columns(),
            delimiter="\t",
            lineterminator="\n",
        )
        self._writer.writeheader()

    def __enter__(self) -> "MAFWriter":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def write_record(self, record: MAFRecord) -> None:
        """Append one record."""
        try:
            self._writer.writerow(record.to_row())
        except (OSError, ValueError) as e:
            raise MAFWriteError(f"Failed to write MAF record to {self.output_path}: {e}") from e
        self._records_written += 1

    def write_records(self, records: list[MAFRecord]) -> None:
        for record in records:
            self.write_record(record)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    @property
    def records_written(self) -> int:
        return self._records_written


def read_maf_file(path: str | Path) -> list[MAFRecord]:
    """Read and validate the rows of a MAF file.

    Raises:
        MAFWriteError: If the file has unexpected columns or invalid rows
    """
    path = Path(path)
    records = []

    try:
        with open(path, "r", newline="") as f:
            reader = csv.DictReader(f, delimiter="\t")
            if reader.fieldnames != MAFRecord.columns():
                raise MAFWriteError(f"Unexpected MAF columns in {path}")

            for line_number, row in enumerate(reader, start=2):
                try:
                    records.append(MAFRecord.model_validate(row))
                except ValidationError as e:
                    raise MAFWriteError(f"Invalid MAF record at {path}:{line_number}: {e}") from e
    except OSError as e:
        raise MAFWriteError(f"Failed to read MAF file: {path}: {e}") from e

    return records


def merge_maf_files(input_paths: list[str | Path], output_path: str | Path) -> int:
    """Concatenate MAF files into one, skipping inputs that do not exist.

    Args:
        input_paths: MAF files to merge, in order
        output_path: Destination MAF path

    Returns:
        Number of records written
    """
    with MAFWriter(output_path) as writer:
        for input_path in input_paths:
            if not Path(input_path).exists():
                logger.warning(f"Skipping missing MAF file: {input_path}")
                continue

            records = read_maf_file(input_path)
            writer.write_records(records)
            logger.info(f"Merged {len(records)} records from {input_path}")

        return writer.records_written
