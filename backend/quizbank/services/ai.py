"""AI chat proxy: forwards a message list to a completion provider.

Both providers speak the OpenAI-compatible /v1/chat/completions protocol.
No retries, no streaming; the first choice's text is returned.
"""

from __future__ import annotations

import httpx

from quizbank.core.app_exceptions import AIProviderError, ValidationError
from quizbank.core.config import settings
from quizbank.core.logging import get_logger
from quizbank.schemas.ai import AIChatRequest, AIProvider

logger = get_logger(__name__)


def resolve_endpoint(request: AIChatRequest) -> tuple[str, str]:
    """Return (url, model) for the requested provider."""
    if request.provider == AIProvider.DEEPSEEK:
        base = (request.base_url or settings.DEEPSEEK_BASE_URL).rstrip("/")
        return f"{base}/v1/chat/completions", settings.DEEPSEEK_MODEL
    if request.provider == AIProvider.ALIBABA:
        base = settings.ALIBABA_BASE_URL.rstrip("/")
        return f"{base}/v1/chat/completions", settings.ALIBABA_MODEL
    raise ValidationError(f"Unsupported AI provider: {request.provider}")


def _error_message(data: object) -> str | None:
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        return data["error"].get("message") or "AI request failed"
    return None


def call_ai(request: AIChatRequest, client: httpx.Client | None = None) -> str:
    """
    Send the chat request and return the completion text.

    Raises:
        AIProviderError: transport failure, provider error or empty response
    """
    url, model = resolve_endpoint(request)
    payload = {
        "model": model,
        "messages": [m.model_dump() for m in request.messages],
    }
    headers = {"Authorization": f"Bearer {request.api_key}"}

    owns_client = client is None
    client = client or httpx.Client(timeout=settings.AI_TIMEOUT_SECONDS)
    try:
        resp = client.post(url, json=payload, headers=headers)
        data = resp.json()
    except httpx.HTTPError as e:
        logger.warning("ai_transport_error", extra={"provider": request.provider.value, "error": str(e)})
        raise AIProviderError(f"AI request failed: {e}") from e
    except ValueError as e:
        raise AIProviderError("AI provider returned a non-JSON response") from e
    finally:
        if owns_client:
            client.close()

    message = _error_message(data)
    if resp.status_code != 200 or message:
        logger.warning(
            "ai_provider_error",
            extra={"provider": request.provider.value, "status_code": resp.status_code},
        )
        raise AIProviderError(message or "AI request failed", details={"status_code": resp.status_code})

    choices = data.get("choices") if isinstance(data, dict) else None
    first = choices[0] if isinstance(choices, list) and choices else None
    reply = first.get("message") if isinstance(first, dict) else None
    content = reply.get("content") if isinstance(reply, dict) else None
    if not isinstance(content, str):
        raise AIProviderError("AI returned an empty response")
    return content
