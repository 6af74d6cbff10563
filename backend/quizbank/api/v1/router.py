"""API v1 router - includes all v1 endpoints."""

from fastapi import APIRouter

from quizbank.api.v1.endpoints import ai, auth, health, question_banks, question_records, questions

api_router = APIRouter()

api_router.include_router(health.router, prefix="", tags=["Health"])
api_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
api_router.include_router(question_banks.router, prefix="/banks", tags=["Question Banks"])
api_router.include_router(questions.router, prefix="", tags=["Questions"])
api_router.include_router(question_records.router, prefix="/records", tags=["Records"])
api_router.include_router(ai.router, prefix="/ai", tags=["AI"])
