from functools import lru_cache

from jobgoblin.ai.config import load_ai_config
from jobgoblin.ai.providers.openai_provider import OpenAIProvider
from jobgoblin.ai.types import AIClient


@lru_cache(maxsize=1)
def get_ai_client() -> AIClient:
    cfg = load_ai_config()

    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            timeout_s=cfg.timeout_s,
            max_tokens=cfg.max_tokens,
            temperature=cfg.temperature,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
