"""Writers for converted JSON output."""

from .json_writer import WriteSummary, write_documents

__all__ = ["WriteSummary", "write_documents"]
