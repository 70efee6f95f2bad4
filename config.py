import os
import secrets


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment"""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('true', 'yes', 'y', '1', 't', 'on')


class Config(object):
    # Basic configuration
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(16)
    DEBUG = False
    TESTING = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Refuse to start when the team table is broken
    VALIDATE_TEAM_ON_STARTUP = env_flag('VALIDATE_TEAM_ON_STARTUP', True)

class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()
    TEMPLATES_AUTO_RELOAD = True
    SEND_FILE_MAX_AGE_DEFAULT = 0

class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'

class ProductionConfig(Config):
    DEBUG = False
    PREFERRED_URL_SCHEME = 'https'

# Environment configuration mapping
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': ProductionConfig
}
