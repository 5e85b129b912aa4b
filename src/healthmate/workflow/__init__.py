"""Client-side workflow state for the patient report flow."""

from __future__ import annotations

from healthmate.workflow.protocols import ChatResponder, ReportAnalysisPort
from healthmate.workflow.session import CONSENT_NOTICE, WorkflowSession

__all__ = [
    "CONSENT_NOTICE",
    "ChatResponder",
    "ReportAnalysisPort",
    "WorkflowSession",
]
