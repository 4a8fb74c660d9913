"""JSON schema sent to the model for structured ATS analysis output."""
from core.models import CATEGORY_SUBJECTS

ATS_ANALYSIS_SCHEMA = {
    "name": "ats_analysis_schema",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "overallScore": {
                "type": "number",
                "description": "Overall relevance of the resume to the job, 0-100."
            },
            "matchedSkills": {
                "type": "array",
                "items": {"type": "string"}
            },
            "missingSkills": {
                "type": "array",
                "items": {"type": "string"}
            },
            "semanticAnalysis": {
                "type": "string",
                "description": "Explanation of the alignment, max 150 words."
            },
            "improvementTips": {
                "type": "array",
                "description": "Exactly 5 actionable tips.",
                "items": {"type": "string"}
            },
            "categoryScores": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "subject": {"type": "string", "enum": CATEGORY_SUBJECTS},
                        "A": {"type": "number", "description": "Score for this subject, 0-100."},
                        "fullMark": {"type": "number"}
                    },
                    "required": ["subject", "A", "fullMark"],
                    "additionalProperties": False
                }
            }
        },
        "required": [
            "overallScore",
            "matchedSkills",
            "missingSkills",
            "semanticAnalysis",
            "improvementTips",
            "categoryScores"
        ],
        "additionalProperties": False
    }
}
