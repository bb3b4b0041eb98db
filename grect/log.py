import logging

from . import settings

logger = logging.getLogger('grect')


def debug_log(message):
    ''' Log message at debug level, only if settings.DEBUG is set. '''
    if settings.DEBUG:
        logger.debug(message)
