"""
Unit tests for environment-driven settings.
Run: pytest tests/test_config.py
"""

from src.config import env_int


def test_env_int_reads_value(monkeypatch):
	monkeypatch.setenv("MOVIE_TEST_COUNT", "25")
	assert env_int("MOVIE_TEST_COUNT", 10) == 25


def test_env_int_missing_or_blank_uses_default(monkeypatch):
	monkeypatch.delenv("MOVIE_TEST_COUNT", raising=False)
	assert env_int("MOVIE_TEST_COUNT", 10) == 10
	monkeypatch.setenv("MOVIE_TEST_COUNT", "  ")
	assert env_int("MOVIE_TEST_COUNT", 10) == 10


def test_env_int_malformed_falls_back(monkeypatch):
	monkeypatch.setenv("MOVIE_TEST_COUNT", "ten")
	assert env_int("MOVIE_TEST_COUNT", 10) == 10
