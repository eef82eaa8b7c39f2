"""Tests for configuration classes."""

import os
from unittest.mock import patch

from config import (
    AppConfig,
    CORSConfig,
    GameConfig,
    LoggingConfig,
    RateLimitConfig,
    RedisConfig,
    _parse_cors_origins,
)


class TestCORSConfig:
    """Tests for CORSConfig class."""

    def test_cors_default_origins(self):
        """Test that default CORS origins are set correctly."""
        with patch.dict(os.environ, {}, clear=True):
            config = CORSConfig()

            assert config.allowed_origins == ["http://localhost:3000"]

    def test_cors_parses_env_var(self):
        """Test that CORS origins are parsed from environment variable."""
        env_origins = "  http://example.com  ,http://localhost:3000,,"
        with patch.dict(os.environ, {"CORS_ORIGINS": env_origins}):
            origins = _parse_cors_origins()

            assert origins == ["http://example.com", "http://localhost:3000"]

    def test_cors_default_methods(self):
        config = CORSConfig()

        assert config.allow_methods == ["GET", "POST"]
        assert config.allow_credentials is True


class TestRateLimitConfig:
    """Tests for RateLimitConfig class."""

    def test_rate_limit_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = RateLimitConfig()

            assert config.enabled is True
            assert config.requests_per_minute == 60

    def test_rate_limit_from_env(self):
        with patch.dict(
            os.environ,
            {"RATE_LIMIT_ENABLED": "FALSE", "RATE_LIMIT_RPM": "120"},
        ):
            config = RateLimitConfig()

            assert config.enabled is False
            assert config.requests_per_minute == 120


class TestRedisConfig:
    """Tests for RedisConfig class."""

    def test_redis_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = RedisConfig()

            assert config.host == "localhost"
            assert config.port == 6379
            assert config.db == 0
            assert config.password is None
            assert config.key_prefix == "blackjack:score:"
            assert config.url == "redis://localhost:6379/0"

    def test_redis_url_with_password(self):
        with patch.dict(
            os.environ,
            {
                "REDIS_HOST": "redis.example.com",
                "REDIS_PORT": "6380",
                "REDIS_DB": "1",
                "REDIS_PASSWORD": "secret123",
            },
        ):
            config = RedisConfig()

            assert config.url == "redis://:secret123@redis.example.com:6380/1"


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_logging_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = LoggingConfig()

            assert config.level == "INFO"
            assert config.format_style == "structured"

    def test_logging_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug", "LOG_FORMAT": "Simple"}):
            config = LoggingConfig()

            assert config.level == "DEBUG"
            assert config.format_style == "simple"


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_game_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = GameConfig()

            assert config.win_points == 100
            assert config.dealer_stands_on == 17
            assert config.default_player == "defaultPlayer"

    def test_default_player_from_env(self):
        with patch.dict(os.environ, {"DEFAULT_PLAYER": "0xabc"}):
            assert GameConfig().default_player == "0xabc"


class TestAppConfig:
    """Tests for the aggregate configuration."""

    def test_app_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig()

            assert config.debug is False
            assert config.port == 8000
            assert isinstance(config.redis, RedisConfig)
            assert isinstance(config.game, GameConfig)
