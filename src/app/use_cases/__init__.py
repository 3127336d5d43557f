"""Casos de uso: pontos de entrada chamados pela plataforma."""
