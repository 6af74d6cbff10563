"""AI chat proxy endpoint."""

from fastapi import APIRouter

from quizbank.core.dependencies import CurrentUser
from quizbank.schemas.ai import AIChatRequest, AIChatResponse
from quizbank.services.ai import call_ai

router = APIRouter()


@router.post("/chat", response_model=AIChatResponse)
def chat(payload: AIChatRequest, current_user: CurrentUser):
    """Forward messages to the chosen provider with the caller's API key."""
    return AIChatResponse(content=call_ai(payload))
