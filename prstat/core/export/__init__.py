from prstat.core.export.csv import (
    CsvExporter,
    CsvHeaderStyle,
    csv_header,
    csv_key,
    pull_requests_to_csv,
)

__all__ = [
    "CsvExporter",
    "CsvHeaderStyle",
    "csv_header",
    "csv_key",
    "pull_requests_to_csv",
]
