from swiftjobs.services.analysis.llm_client import LLMClient, LLMSettings, LLMError
from swiftjobs.services.analysis.analyzer import ProfileAnalyzer

__all__ = [
    "LLMClient",
    "LLMSettings",
    "LLMError",
    "ProfileAnalyzer",
]
