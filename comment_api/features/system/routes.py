"""
Системные маршруты для проверки здоровья приложения.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

system_router = APIRouter(tags=["system"])


@system_router.get("/health", response_class=PlainTextResponse)
async def health_check():
    """
    Проверка, что сервис запущен.
    """
    return "I am alive!"
