"""Questkeeper: text adventure game backend."""
