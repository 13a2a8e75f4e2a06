# dispatchcore/core/audit/__init__.py
from .journal import AuditEntry, AuditJournal

__all__ = ["AuditEntry", "AuditJournal"]
