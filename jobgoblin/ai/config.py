from dataclasses import dataclass

from jobgoblin.core.config import settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    timeout_s: float
    max_tokens: int
    temperature: float


def load_ai_config() -> AIConfig:
    return AIConfig(
        provider=settings.ai_provider,
        model=settings.ai_model,
        timeout_s=settings.ai_timeout_s,
        max_tokens=settings.ai_max_tokens,
        temperature=settings.ai_temperature,
    )
