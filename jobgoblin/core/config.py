from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    rate_limit_enabled: bool
    rate_limit: str
    tailor_rate_limit: str
    auth_rate_limit: str
    supabase_url: str | None
    supabase_anon_key: str | None
    supabase_service_role_key: str | None
    resumes_bucket: str
    openai_api_key: str | None
    openai_base_url: str | None
    ai_provider: str
    ai_model: str
    ai_timeout_s: float
    ai_max_tokens: int
    ai_temperature: float
    pdf_extractor: str
    pdftotext_path: str
    extract_timeout_s: float
    temp_dir: str
    max_upload_bytes: int
    analytics_enabled: bool
    analytics_db_path: str
    analytics_retention_days: int


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ],
    ),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", True),
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
    tailor_rate_limit=_get_env("TAILOR_RATE_LIMIT", "10/minute") or "10/minute",
    auth_rate_limit=_get_env("AUTH_RATE_LIMIT", "20/minute") or "20/minute",
    supabase_url=_get_env("SUPABASE_URL"),
    supabase_anon_key=_get_env("SUPABASE_ANON_KEY"),
    supabase_service_role_key=_get_env("SUPABASE_SERVICE_ROLE_KEY"),
    resumes_bucket=_get_env("RESUMES_BUCKET", "resumes") or "resumes",
    openai_api_key=_get_env("OPENAI_API_KEY"),
    openai_base_url=_get_env("OPENAI_BASE_URL"),
    ai_provider=(_get_env("AI_PROVIDER", "openai") or "openai").strip().lower(),
    ai_model=(_get_env("AI_MODEL", "gpt-4-turbo") or "gpt-4-turbo").strip(),
    ai_timeout_s=_get_env_float("AI_TIMEOUT_S", 60.0),
    ai_max_tokens=_get_env_int("AI_MAX_TOKENS", 1500),
    ai_temperature=_get_env_float("AI_TEMPERATURE", 0.3),
    pdf_extractor=(_get_env("PDF_EXTRACTOR", "pdftotext") or "pdftotext").strip().lower(),
    pdftotext_path=_get_env("PDFTOTEXT_PATH", "pdftotext") or "pdftotext",
    extract_timeout_s=_get_env_float("EXTRACT_TIMEOUT_S", 30.0),
    temp_dir=_get_env("TEMP_DIR", tempfile.gettempdir()) or tempfile.gettempdir(),
    max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
    analytics_enabled=_get_env_bool("ANALYTICS_ENABLED", True),
    analytics_db_path=_get_env("ANALYTICS_DB_PATH", "data/analytics.db") or "data/analytics.db",
    analytics_retention_days=_get_env_int("ANALYTICS_RETENTION_DAYS", 90),
)

if settings.pdf_extractor not in {"pdftotext", "pypdf"}:
    raise RuntimeError("PDF_EXTRACTOR must be either 'pdftotext' or 'pypdf'.")

if settings.ai_provider not in {"openai"}:
    raise RuntimeError(f"Unsupported AI_PROVIDER='{settings.ai_provider}'.")
