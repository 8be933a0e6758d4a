from __future__ import annotations

import logging
import time
import uuid

from jobgoblin.ai.factory import get_ai_client
from jobgoblin.ai.types import AIClient
from jobgoblin.analytics.db import log_ai_run
from jobgoblin.core.errors import ModelError
from jobgoblin.tailoring.prompt import build_messages

logger = logging.getLogger(__name__)

OPERATION = "tailor_resume"


def _log_run(
    *,
    run_id: str,
    model: str,
    status: str,
    started: float,
    prompt_chars: int,
    error_code: str | None = None,
) -> None:
    try:
        log_ai_run(
            run_id=run_id,
            operation=OPERATION,
            model=model,
            status=status,
            error_code=error_code,
            latency_ms=int((time.perf_counter() - started) * 1000),
            prompt_chars=prompt_chars,
        )
    except Exception:  # noqa: BLE001
        logger.debug("ai_run_logging_failed", exc_info=True)


def request_tailored_text(resume_text: str, job_description: str, *, client: AIClient | None = None) -> str:
    """Ask the language model for the five tailored sections. One attempt, no retries."""
    run_id = uuid.uuid4().hex
    started = time.perf_counter()
    messages = build_messages(resume_text, job_description)
    prompt_chars = sum(len(message.content) for message in messages)
    model = "unknown"

    try:
        client = client or get_ai_client()
        model = client.model
        reply = client.complete(messages)
    except Exception as exc:  # noqa: BLE001
        logger.error("tailor_model_failed model=%s prompt_chars=%s: %s", model, prompt_chars, exc)
        _log_run(
            run_id=run_id,
            model=model,
            status="error",
            started=started,
            prompt_chars=prompt_chars,
            error_code="llm_exception",
        )
        raise ModelError() from exc

    if not reply or not reply.strip():
        logger.error("tailor_model_empty model=%s", model)
        _log_run(
            run_id=run_id,
            model=model,
            status="empty",
            started=started,
            prompt_chars=prompt_chars,
            error_code="empty_response",
        )
        raise ModelError(code="model_empty")

    _log_run(run_id=run_id, model=model, status="success", started=started, prompt_chars=prompt_chars)
    logger.info("tailor_model_ok model=%s run_id=%s reply_chars=%s", model, run_id, len(reply))
    return reply
