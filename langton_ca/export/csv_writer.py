"""CSV export functionality for Langton's ant simulation."""

import csv
from pathlib import Path
from typing import IO, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.state import SimulationState

FIELDNAMES = ['step', 'agent_index', 'x', 'y', 'heading']


class CSVWriter:
    """
    Appends one row per agent for every recorded frame.

    Output format:
        step,agent_index,x,y,heading
        1,0,1,0,1
        ...

    The roster only grows, so rows per frame grow with it; rows_written
    counts everything since open().
    """

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self.file: Optional[IO[str]] = None
        self.writer: Optional[csv.DictWriter] = None
        self.rows_written = 0

    @property
    def is_open(self) -> bool:
        return self.file is not None

    def open(self) -> None:
        """Create parent directories, truncate the file and write the header."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.file = open(self.output_path, 'w', newline='')
        self.writer = csv.DictWriter(self.file, fieldnames=FIELDNAMES)
        self.writer.writeheader()
        self.rows_written = 0

    def append(self, state: "SimulationState") -> None:
        """Write roster rows for the snapshot's tick."""
        if not self.is_open:
            self.open()
        rows = state.to_csv_rows()
        self.writer.writerows(rows)
        self.rows_written += len(rows)
        self.file.flush()

    def close(self) -> None:
        """Close file handle."""
        if self.file:
            self.file.close()
            self.file = None
            self.writer = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
