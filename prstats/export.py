"""Export of aggregate results as JSON or CSV."""

import csv
import json
import sys
from typing import TextIO

from prstats.errors import UnsupportedExportFormat
from prstats.models import AggregateResult

EXPORT_FORMATS = ("json", "csv")
CSV_FIELDS = ["url", "readyDate", "mergedDate", "durationHours"]


def export_data(result: AggregateResult, fmt: str, stream: TextIO | None = None) -> None:
    """Write result to stream (default stdout) in the given format.

    json: the whole result document. csv: one row per pull request.

    Raises:
        UnsupportedExportFormat: If fmt is not json or csv.
    """
    out = stream if stream is not None else sys.stdout
    if fmt == "json":
        json.dump(result.to_export(), out, indent=2)
        out.write("\n")
    elif fmt == "csv":
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, lineterminator="\n")
        writer.writeheader()
        for record in result.records:
            writer.writerow(record.to_export())
    else:
        raise UnsupportedExportFormat(fmt)
