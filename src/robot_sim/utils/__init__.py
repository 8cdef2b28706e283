"""Shared utilities — constants and cross-cutting concerns.

Rules
-----
* No business logic.
* Importable by any layer.
"""
