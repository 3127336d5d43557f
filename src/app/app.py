"""Entrypoint do serviço de coordenação de efeitos.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import create_coordinator, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings, get_coordinator_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from effects.manager import EffectCoordinator

CoordinatorFactory = Callable[[], "EffectCoordinator"]

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def create_app(coordinator_factory: CoordinatorFactory | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        coordinator_factory: Factory do coordinator (padrão: create_coordinator).
            Testes injetam um coordinator com store e plataforma falsos.

    Returns:
        Aplicação FastAPI configurada.
    """
    factory = coordinator_factory or create_coordinator

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: valida settings e cria o coordinator.

        Shutdown: cancela esperas pendentes e drena efeitos em voo.
        """
        service_name = get_base_settings().service_name
        logger.info("app_starting", extra={"service": service_name})
        validate_runtime_settings()
        app.state.coordinator = factory()

        yield

        logger.info("app_shutting_down", extra={"service": service_name})
        coordinator = app.state.coordinator
        await coordinator.shutdown(get_coordinator_settings().shutdown_timeout_seconds)

    fastapi_app = FastAPI(
        title="Effect Coordination Core",
        description="Coordenação de efeitos: notificações, superfícies e cadeias",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"component": "app"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting effect core in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
