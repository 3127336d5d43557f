"""Exceções de domínio para falhas de coordenação de efeitos."""

from __future__ import annotations


class CoordinationError(RuntimeError):
    """Base para falhas do núcleo de coordenação."""


class EffectFailure(CoordinationError):
    """Efeito não conseguiu cumprir seu contrato.

    Propaga para quem aguarda o efeito; despachos fire-and-forget
    apenas registram em log.

    Attributes:
        reason: Motivo da falha (seguro para logs)
        effect_name: Nome do efeito que falhou (se conhecido)
    """

    def __init__(self, reason: str, effect_name: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.effect_name = effect_name


class WaitTimeoutError(EffectFailure):
    """Predicado não ficou verdadeiro dentro do prazo informado."""


class PlatformUnavailableError(EffectFailure):
    """Plataforma recusou ou não conseguiu atender a requisição."""


class CoordinatorClosedError(CoordinationError):
    """Coordinator já foi encerrado e não aceita novos despachos."""
