"""Infra: implementações concretas de IO e estado."""
