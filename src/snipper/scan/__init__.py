"""Scanners — tagged regions, document inclusions, extracted snippet files."""

from snipper.scan.inclusions import scan_inclusions
from snipper.scan.materialized import snippet_name_from_path
from snipper.scan.tags import scan_regions, scan_tags

__all__ = ["scan_inclusions", "scan_regions", "scan_tags", "snippet_name_from_path"]
