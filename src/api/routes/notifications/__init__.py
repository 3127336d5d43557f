"""Rotas de notificações."""
