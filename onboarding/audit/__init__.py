"""Audit logging package."""

from onboarding.audit.logger import AuditLogger, create_session_id

__all__ = ["AuditLogger", "create_session_id"]
