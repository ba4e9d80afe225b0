"""Audit trail of profile changes."""

from .logger import AuditLogger

__all__ = ["AuditLogger"]
