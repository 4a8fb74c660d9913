"""
OpenAI Scoring Service - scoring oracle backed by the OpenAI API.

Sends resume and job description text, requests JSON-schema structured
output and validates the result before it reaches the domain model.
Failures are not retried; the user retries manually.
"""
from typing import Dict, Any, Optional, Tuple
import json
import logging
import copy

import openai
from openai import OpenAI
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import OracleFailure
from core.llm.interfaces import ScoringOracle
from core.llm.schema_models import ATS_ANALYSIS_SCHEMA
from core.llm.system_prompts import ATS_ANALYSIS_SYSTEM_PROMPT, build_analysis_user_message
from core.models import AnalysisResponse, CATEGORY_SUBJECTS

logger = logging.getLogger(__name__)

EXPECTED_TIP_COUNT = 5


def _unwrap_schema_spec(spec: Dict[str, Any]) -> Tuple[str, bool, Dict[str, Any]]:
    """Unwrap a schema spec to extract name, strict flag, and raw JSON schema.

    Args:
        spec: Either a wrapped spec {'name': str, 'strict': bool, 'schema': {...}}
              or a raw JSON schema dict

    Returns:
        Tuple of (name, strict, raw_schema)
    """
    if isinstance(spec, dict) and "schema" in spec and "name" in spec:
        return spec.get("name", "analysis_response"), bool(spec.get("strict", False)), spec["schema"]
    return "analysis_response", False, spec


def parse_analysis_response(content: Optional[str]) -> AnalysisResponse:
    """Validate raw model output against the analysis schema.

    Raises:
        OracleFailure: If content is empty, not JSON, or violates the schema
    """
    if not content or not content.strip():
        raise OracleFailure("Empty AI response")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise OracleFailure(f"AI response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise OracleFailure(f"AI response must be a JSON object, got {type(data).__name__}")

    try:
        analysis = AnalysisResponse.model_validate(data)
    except PydanticValidationError as e:
        raise OracleFailure(f"AI response failed schema validation: {e}") from e

    if len(analysis.improvement_tips) != EXPECTED_TIP_COUNT:
        logger.warning(
            f"Expected {EXPECTED_TIP_COUNT} improvement tips, got {len(analysis.improvement_tips)}"
        )
    subjects = {c.subject for c in analysis.category_scores}
    if subjects != set(CATEGORY_SUBJECTS):
        logger.warning(f"Unexpected category subjects: {sorted(subjects)}")

    return analysis


class OpenAIScoringService(ScoringOracle):
    """
    OpenAI scoring oracle.

    Uses JSON Schema mode so the model answers in the analysis shape.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.0,
        timeout_seconds: float = 120.0,
    ):
        client_kwargs: Dict[str, Any] = {'max_retries': 0, 'timeout': timeout_seconds}
        if api_key:
            client_kwargs['api_key'] = api_key
        if base_url:
            client_kwargs['base_url'] = base_url

        self._client_kwargs = client_kwargs
        self._client: Optional[OpenAI] = None
        self.model = model
        self.temperature = temperature

    @property
    def client(self) -> OpenAI:
        # Created on first use so a missing API key only fails analysis requests
        if self._client is None:
            try:
                self._client = OpenAI(**self._client_kwargs)
            except openai.OpenAIError as e:
                raise OracleFailure(f"AI engine is not configured: {e}") from e
        return self._client

    @client.setter
    def client(self, value: OpenAI) -> None:
        self._client = value

    def analyze_resume(self, resume_text: str, job_description: str) -> AnalysisResponse:
        name, strict, raw_schema = _unwrap_schema_spec(ATS_ANALYSIS_SCHEMA)

        messages = [
            {"role": "system", "content": ATS_ANALYSIS_SYSTEM_PROMPT},
            {"role": "user", "content": build_analysis_user_message(resume_text, job_description)},
        ]

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": name,
                        "schema": copy.deepcopy(raw_schema),
                        "strict": strict,
                    },
                },
            )
        except openai.OpenAIError as e:
            logger.error(f"Scoring request failed ({self.model}): {e}")
            raise OracleFailure(f"AI engine error: {e}") from e

        try:
            content = response.choices[0].message.content
        except (IndexError, AttributeError) as e:
            logger.error(f"Failed to read scoring response: {e}")
            raise OracleFailure("AI response had no content") from e

        analysis = parse_analysis_response(content)
        logger.info(
            f"Scored resume with {self.model}: overall={analysis.overall_score}, "
            f"matched={len(analysis.matched_skills)}, missing={len(analysis.missing_skills)}"
        )
        return analysis
