"""Observabilidade: logs estruturados, correlação, métricas.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_effect_outcome, record_guard_suppressed
"""

from app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_effect_outcome,
    record_guard_suppressed,
    record_latency,
    record_routing,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "record_effect_outcome",
    "record_guard_suppressed",
    "record_latency",
    "record_routing",
    "reset_correlation_id",
    "set_correlation_id",
]
