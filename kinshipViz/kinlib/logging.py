import logging
from .config import settings
_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
logging.basicConfig(level=_level, format=settings.LOG_FORMAT)
logger = logging.getLogger(settings.APP_NAME)
