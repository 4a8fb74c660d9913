"""LLM Module - scoring oracle services and interfaces."""
from core.llm.interfaces import ScoringOracle
from core.llm.openai_service import OpenAIScoringService

__all__ = ['ScoringOracle', 'OpenAIScoringService']
