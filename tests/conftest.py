"""Pytest configuration.

pythonpath in pyproject.toml puts src/ and the project root on sys.path so
tests import jakarta_cdi_lint and the shared builders in tests.unit.
"""
