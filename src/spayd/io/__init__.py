"""
spayd.io — batch reports over descriptor text.

## Public API
- build_report — parse/check many descriptors into a Polars DataFrame.
- write_report — persist a report as Parquet or CSV (atomic tmp → final rename).

## Import DAG discipline
- Depends on stdlib, polars, spayd.core, and spayd.config.
"""

from .errors import IoError, IoWriteError
from .report import REPORT_SCHEMA, build_report, write_report

__all__ = ["REPORT_SCHEMA", "build_report", "write_report", "IoError", "IoWriteError"]
