"""Snippet extraction into the target directory."""

from snipper.extract.writer import ExtractionOutcome, ExtractionResult, extract_all, extract_snippet

__all__ = ["ExtractionOutcome", "ExtractionResult", "extract_all", "extract_snippet"]
