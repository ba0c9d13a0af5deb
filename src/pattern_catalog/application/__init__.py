"""Application services."""

from .document_service import DocumentService
from .lint_service import LintService
from .verification_service import VerificationService

__all__ = ["DocumentService", "LintService", "VerificationService"]
