"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos. Não há store
global: cada chamada de `create_coordinator` produz uma instância
isolada (uma por processo em produção, uma por teste).

Uso:
    from app.bootstrap import initialize_app, create_coordinator

    initialize_app()
    coordinator = create_coordinator()
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import (
    AppDependencies,
    BundleInfo,
    create_app_dependencies,
    create_coordinator,
    create_platform_bridge,
    create_state_store,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_coordinator_settings,
    get_platform_settings,
)
from effects.manager import get_current_effect_name

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)

__all__ = [
    "AppDependencies",
    "BundleInfo",
    "create_app_dependencies",
    "create_coordinator",
    "create_platform_bridge",
    "create_state_store",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]


def initialize_app() -> None:
    """Inicializa logging estruturado com correlation_id e efeito corrente.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        effect_name_getter=get_current_effect_name,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
        effect_name_getter=get_current_effect_name,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"coordinator: {error}" for error in get_coordinator_settings().validate())
    errors.extend(f"platform: {error}" for error in get_platform_settings().validate(base))

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
