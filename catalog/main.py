"""
Главный модуль FastAPI приложения Catalog API.

Содержит конфигурацию приложения, middleware, обработчики ошибок и роутеры.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog.api.v1.routers import api_router
from catalog.core.config import settings
from catalog.core.errors import CatalogError
from catalog.db.database import engine
from catalog.db.models import Base

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Создание экземпляра FastAPI приложения
app = FastAPI(
    title="Catalog API",
    description="API каталога: категории, товары и пользователи с мягким удалением",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)


# Настройка CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    """
    Преобразование доменной ошибки в ответ {"reason": ..., "statusCode": ...}.
    """
    logger.warning(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.reason}"
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Ошибки валидации тела запроса отдаются со статусом 400.

    Причина строится по первой ошибке pydantic.
    """
    errors = exc.errors()
    reason = "Invalid request"
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        reason = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    logger.warning(f"{request.method} {request.url.path} -> 400: {reason}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"reason": reason, "statusCode": status.HTTP_400_BAD_REQUEST},
    )


@app.get("/healthz")
def healthz():
    """
    Health check endpoint для мониторинга состояния приложения.

    Returns:
        dict: Статус приложения
    """
    return {"status": "ok", "service": "Catalog API", "version": "1.0.0"}


# Подключение API роутеров
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup_event():
    """
    Событие запуска приложения.

    Создает недостающие таблицы.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema is ready")
