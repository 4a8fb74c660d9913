"""
Analysis service - runs one resume/job-description analysis end to end.

Validates input, calls the scoring oracle, builds the ATSReport and
hands it to the candidate board for persistence.
"""
import logging
from typing import Optional

from core.config_loader import AnalysisConfig
from core.exceptions import ValidationError
from core.llm.interfaces import ScoringOracle
from core.models import ATSReport, User
from core.parsing.document_parser import DocumentParser
from core.ranking.board import CandidateBoard
from core.utils import random_id, utc_now_iso

logger = logging.getLogger(__name__)


def derive_job_title(job_description: str, max_chars: int = 50, default: str = "Resume Diagnostic") -> str:
    """First line of the job description, cut to max_chars."""
    first_line = job_description.split('\n')[0]
    return first_line[:max_chars].strip() or default


class AnalysisService:
    """Turn a resume and a job description into a stored ATS report."""

    def __init__(
        self,
        oracle: ScoringOracle,
        board: CandidateBoard,
        config: Optional[AnalysisConfig] = None,
        parser: Optional[DocumentParser] = None,
    ):
        self.oracle = oracle
        self.board = board
        self.config = config or AnalysisConfig()
        self.parser = parser or DocumentParser(max_file_size_bytes=self.config.max_file_size_bytes)

    def analyze(self, user: User, resume_text: str, job_description: str) -> ATSReport:
        """Score resume_text against job_description for user and store the report.

        Raises:
            ValidationError: If either text is blank
            OracleFailure: If scoring fails; nothing is stored
        """
        if not resume_text.strip() or not job_description.strip():
            raise ValidationError("Provide both your resume and the job description for analysis.")

        resume_text = resume_text[:self.config.max_resume_chars]

        analysis = self.oracle.analyze_resume(resume_text, job_description)

        report = ATSReport(
            id=random_id(),
            user_id=user.id,
            user_name=user.name,
            job_title=derive_job_title(
                job_description,
                max_chars=self.config.job_title_max_chars,
                default=self.config.default_job_title,
            ),
            created_at=utc_now_iso(),
            resume_content=resume_text,
            job_description=job_description,
            status="pending",
            overall_score=analysis.overall_score,
            matched_skills=analysis.matched_skills,
            missing_skills=analysis.missing_skills,
            semantic_analysis=analysis.semantic_analysis,
            improvement_tips=analysis.improvement_tips,
            category_scores=analysis.category_scores,
        )

        self.board.add_report(report)
        logger.info(f"Stored report {report.id} for user {user.id} ({report.job_title}): {report.overall_score}")
        return report

    def analyze_document(self, user: User, filename: str, data: bytes, job_description: str) -> ATSReport:
        """Extract text from an uploaded resume file, then analyze it.

        Raises:
            UnsupportedDocumentFormat: If the file type is not supported
            DocumentParseError: If no text can be extracted
        """
        parsed = self.parser.extract_text(filename, data)
        return self.analyze(user, parsed.text, job_description)
