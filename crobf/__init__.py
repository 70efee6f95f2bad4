import logging

from flask import Flask

from config import config
from crobf.utils import team

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    level = str(level).upper()
    known = isinstance(logging.getLevelName(level), int)
    if not known:
        level = 'INFO'
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('crobf').setLevel(level)
    if not known:
        logger.warning('Unknown LOG_LEVEL setting, falling back to INFO')


def create_app(config_name='default'):
    app = Flask(__name__)
    app.config.from_object(config[config_name])

    setup_logging(app.config.get('LOG_LEVEL', 'INFO'))

    if app.config.get('VALIDATE_TEAM_ON_STARTUP', True):
        count = team.validate_team_members()
        logger.info(f'Validated {count} team members')

    # Add template globals
    team.init_app(app)

    return app
