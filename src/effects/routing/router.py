"""
Roteamento de notificações por pertinência a conjuntos de IDs.

Cada regra associa um conjunto nomeado de IDs a um construtor de
efeito. A pertinência é avaliada de forma independente por regra: um
ID pode casar com zero, uma ou várias regras, e o resultado é a união
dos efeitos produzidos. ID sem regra não é erro (resultado vazio).

Novas regras são configuração (dados), não novo fluxo de controle.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from utils.errors import EffectFailure

if TYPE_CHECKING:
    from effects.types.effect import Effect

logger = logging.getLogger(__name__)

EffectBuilder = Callable[[str], "Effect"]


@dataclass(frozen=True, slots=True)
class RoutingRule:
    """
    Regra de roteamento.

    Attributes:
        name: Nome do conjunto (ex: "update_required")
        notification_ids: IDs que disparam a regra
        build_effect: Constrói o efeito a partir do ID recebido
    """

    name: str
    notification_ids: frozenset[str]
    build_effect: EffectBuilder

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("RoutingRule.name não pode ser vazio")
        if not isinstance(self.notification_ids, frozenset):
            object.__setattr__(self, "notification_ids", frozenset(self.notification_ids))

    def matches(self, notification_id: str) -> bool:
        return notification_id in self.notification_ids


class NotificationRouter:
    """Classifica IDs de notificação contra as regras configuradas."""

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[RoutingRule]) -> None:
        self._rules: tuple[RoutingRule, ...] = tuple(rules)
        names = [rule.name for rule in self._rules]
        duplicated = sorted({name for name in names if names.count(name) > 1})
        if duplicated:
            raise ValueError(f"Regras de roteamento duplicadas: {', '.join(duplicated)}")

    @property
    def rules(self) -> tuple[RoutingRule, ...]:
        return self._rules

    def match(self, notification_id: str) -> tuple[RoutingRule, ...]:
        """Retorna as regras cujo conjunto contém o ID."""
        return tuple(rule for rule in self._rules if rule.matches(notification_id))

    def route(self, notification_id: str) -> tuple[Effect, ...]:
        """
        Retorna a união dos efeitos das regras casadas.

        A ordem não faz parte do contrato; cada efeito deve ser
        despachado de forma individual e independente.

        Args:
            notification_id: ID da notificação recebida

        Returns:
            Efeitos a despachar (vazio se nenhuma regra casar)

        Raises:
            EffectFailure: Construtor de alguma regra falhou
        """
        matched = self.match(notification_id)
        if not matched:
            logger.debug("notification_unmatched", extra={"matched_rules": 0})
            return ()

        effects = tuple(dict.fromkeys(_build(rule, notification_id) for rule in matched))
        logger.debug(
            "notification_routed",
            extra={
                "matched_rules": [rule.name for rule in matched],
                "effects": [effect.name for effect in effects],
            },
        )
        return effects


def _build(rule: RoutingRule, notification_id: str) -> Effect:
    try:
        return rule.build_effect(notification_id)
    except Exception as exc:
        raise EffectFailure(
            f"regra {rule.name} não construiu efeito: {type(exc).__name__}"
        ) from exc
