from functools import lru_cache
from fastapi import Depends

from swiftjobs.core.config import get_settings
from swiftjobs.services.analysis import LLMClient, LLMSettings, ProfileAnalyzer


@lru_cache()
def get_llm_client() -> LLMClient:
    settings = get_settings()
    provider = settings.llm_config.get("provider", "groq")
    llm_settings = LLMSettings(
        provider=provider,
        model=settings.llm_config.get("model", "llama-3.3-70b-versatile"),
        temperature=settings.llm_config.get("temperature", 0.5),
        max_tokens=settings.llm_config.get("max_tokens", 1500),
        api_key=settings.llm_config.get("api_key") or settings.provider_api_key(provider)
    )
    return LLMClient(llm_settings)


def get_analyzer(llm_client: LLMClient = Depends(get_llm_client)) -> ProfileAnalyzer:
    return ProfileAnalyzer(llm_client, default_score=get_settings().DEFAULT_MATCH_SCORE)
