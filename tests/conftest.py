"""Configuração do pytest para o núcleo de coordenação de efeitos."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    """Settings são cacheadas por processo; cada teste lê o env do zero."""
    from config.settings import (
        get_base_settings,
        get_coordinator_settings,
        get_platform_settings,
    )

    get_base_settings.cache_clear()
    get_coordinator_settings.cache_clear()
    get_platform_settings.cache_clear()
