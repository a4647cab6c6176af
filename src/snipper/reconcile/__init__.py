"""Reconciliation — one record per snippet name across all three origins."""

from snipper.reconcile.engine import ReconcileResult, reconcile, reconcile_files
from snipper.reconcile.store import DuplicateDefinition, SnippetStore

__all__ = [
    "DuplicateDefinition",
    "ReconcileResult",
    "SnippetStore",
    "reconcile",
    "reconcile_files",
]
