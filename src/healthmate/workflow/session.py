"""Report-analysis workflow: upload → analysis → Q&A → report type → final report.

``WorkflowSession`` owns all per-user state and is mutated only through its
named transition methods.  The workflow moves strictly forward; the single
backward transition is ``reset()``, which returns to ``profile`` and clears
everything, including the consent flag.

At most one analysis call and one report-generation call can be in flight.
A reply that arrives after ``reset()`` belongs to a discarded session and is
dropped.
"""

from __future__ import annotations

import logging
from typing import Optional

from healthmate.exceptions import (
    AnalysisError,
    ConsentRequiredError,
    EmptyInputError,
    InvalidReportTypeError,
    InvalidTransitionError,
    OperationInProgressError,
    ReportGenerationError,
)
from healthmate.models import (
    AnswerMap,
    GeneratedReport,
    MedicalAnalysis,
    ReportData,
    ReportKind,
    WorkflowState,
)
from healthmate.workflow.protocols import ReportAnalysisPort

log = logging.getLogger(__name__)

CONSENT_NOTICE = (
    "Your medical report will be processed by an AI service to generate an analysis "
    "and follow-up questions. Do not include information you are not comfortable sharing. "
    "By continuing you consent to the AI analysis of your medical information."
)


class WorkflowSession:
    """One user's traversal of the report-analysis workflow."""

    def __init__(self, ai: ReportAnalysisPort) -> None:
        self._ai = ai
        self._epoch = 0
        # In-flight flags outlive reset(): a pending call still occupies its slot.
        self._analyzing = False
        self._generating = False
        self._clear()

    def _clear(self) -> None:
        self._state = WorkflowState.PROFILE
        self._report_text = ""
        self._analysis: Optional[MedicalAnalysis] = None
        self._answers: AnswerMap = {}
        self._question_index = 0
        self._report_kind: Optional[ReportKind] = None
        self._report: Optional[GeneratedReport] = None
        self._consent_given = False
        self._error: Optional[str] = None

    # ── Read-only views ─────────────────────────────────────────────

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def report_text(self) -> str:
        return self._report_text

    @property
    def analysis(self) -> Optional[MedicalAnalysis]:
        return self._analysis

    @property
    def answers(self) -> AnswerMap:
        return dict(self._answers)

    @property
    def question_index(self) -> int:
        return self._question_index

    @property
    def current_question(self) -> Optional[str]:
        if self._state != WorkflowState.QUESTIONS or self._analysis is None:
            return None
        return self._analysis.questions[self._question_index]

    @property
    def report_kind(self) -> Optional[ReportKind]:
        return self._report_kind

    @property
    def report(self) -> Optional[GeneratedReport]:
        return self._report

    @property
    def consent_given(self) -> bool:
        return self._consent_given

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_analyzing(self) -> bool:
        return self._analyzing

    @property
    def is_generating(self) -> bool:
        return self._generating

    @property
    def is_busy(self) -> bool:
        return self._analyzing or self._generating

    # ── Transitions ─────────────────────────────────────────────────

    def _require(self, expected: WorkflowState, action: str) -> None:
        if self._state != expected:
            raise InvalidTransitionError(
                f"Cannot {action} in state {self._state.value!r}; expected {expected.value!r}"
            )

    def start_upload(self) -> None:
        """``profile`` → ``upload``."""
        self._require(WorkflowState.PROFILE, "start upload")
        self._state = WorkflowState.UPLOAD

    def set_report_text(self, text: str) -> None:
        """Store pasted or extracted report text for analysis."""
        self._require(WorkflowState.UPLOAD, "set report text")
        self._report_text = text

    def give_consent(self) -> None:
        """Acknowledge the data-processing notice for the rest of the session."""
        self._consent_given = True

    async def request_analysis(self) -> bool:
        """Run the analysis, or return ``False`` when consent must be asked first.

        Empty report text is a no-op returning ``False`` as well.
        """
        if not self._report_text.strip():
            return False
        if not self._consent_given:
            return False
        await self.analyze()
        return True

    async def analyze(self) -> Optional[MedicalAnalysis]:
        """``upload`` → ``questions`` on an analysis with at least one question.

        Returns ``None`` if the session was reset while the call was pending.

        Raises:
            EmptyInputError: No report text has been set.
            ConsentRequiredError: The notice has not been acknowledged.
            OperationInProgressError: An analysis is already pending.
            AnalysisError: The analysis contains no questions.
        """
        self._require(WorkflowState.UPLOAD, "analyze")
        if not self._report_text.strip():
            raise EmptyInputError("No text provided")
        if not self._consent_given:
            raise ConsentRequiredError("Consent is required before analysis")
        if self._analyzing:
            raise OperationInProgressError("An analysis is already in progress")

        epoch = self._epoch
        self._analyzing = True
        self._error = None
        try:
            analysis = await self._ai.analyze_report(self._report_text)
        except Exception as exc:
            if epoch == self._epoch:
                self._error = str(exc) or "Failed to analyze report"
            raise
        finally:
            self._analyzing = False

        if epoch != self._epoch:
            log.info("Discarding analysis for a reset workflow session")
            return None

        if analysis is None or not analysis.questions:
            self._error = "Invalid analysis received from server"
            raise AnalysisError(self._error)

        self._analysis = analysis
        self._answers = {}
        self._question_index = 0
        self._state = WorkflowState.QUESTIONS
        log.info("Analysis complete", extra={"questions": len(analysis.questions)})
        return analysis

    def submit_answer(self, answer: str) -> bool:
        """Record the answer to the current question and advance.

        Empty answers are ignored and return ``False``.  The answer to the last
        question moves the workflow to ``report-type``.
        """
        self._require(WorkflowState.QUESTIONS, "submit an answer")
        assert self._analysis is not None
        if not answer or not answer.strip():
            return False

        question = self._analysis.questions[self._question_index]
        self._answers[question] = answer
        if self._question_index < len(self._analysis.questions) - 1:
            self._question_index += 1
        else:
            self._state = WorkflowState.REPORT_TYPE
        return True

    async def generate_report(self, kind: ReportKind | str) -> Optional[GeneratedReport]:
        """``report-type`` → ``final-report``.

        Returns ``None`` if the session was reset while the call was pending.

        Raises:
            InvalidReportTypeError: *kind* is not personal/professional.
            OperationInProgressError: A report is already being generated.
            ReportGenerationError: The generated report has no content.
        """
        self._require(WorkflowState.REPORT_TYPE, "generate a report")
        assert self._analysis is not None
        try:
            kind = ReportKind(kind)
        except ValueError as exc:
            raise InvalidReportTypeError("Invalid report type") from exc
        if self._generating:
            raise OperationInProgressError("A report is already being generated")

        data = ReportData(
            patient_responses=dict(self._answers),
            original_report=self._report_text,
            analysis=self._analysis,
        )

        epoch = self._epoch
        self._report_kind = kind
        self._generating = True
        self._error = None
        try:
            report = await self._ai.generate_report(kind, data)
        except Exception as exc:
            if epoch == self._epoch:
                self._error = str(exc) or "Failed to generate report"
            raise
        finally:
            self._generating = False

        if epoch != self._epoch:
            log.info("Discarding report for a reset workflow session")
            return None

        if report is None or not report.content or not report.content.strip():
            self._error = "Invalid report received from server"
            raise ReportGenerationError(self._error)

        self._report = report
        self._state = WorkflowState.FINAL_REPORT
        return report

    def dismiss_error(self) -> None:
        self._error = None

    def reset(self) -> None:
        """Any state → ``profile``; clears every accumulated entity and consent.

        A call already in flight keeps the session busy until it lands; its
        result is then discarded.
        """
        self._epoch += 1
        self._clear()
