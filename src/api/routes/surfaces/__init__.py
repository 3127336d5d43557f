"""Rotas de superfícies e estado."""
