"""Package logger and one-shot warnings for gridref"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('gridref')
LOGGER.setLevel(logging.WARNING)
_HANDLER = logging.StreamHandler()
_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_HANDLER)

# Message templates which have already been emitted
_WARNINGS = set()


def warn_once(template: str, *args):
    """
    Logs a warning the first time a message template is seen. Arguments are
    formatted by logging, so repeated use of one template with different arguments
    is still logged only once.

    Args:
        template:
            A %-style logging message

        *args:
            Arguments for the template

    Returns:
        None
    """
    if template in _WARNINGS:
        return

    _WARNINGS.add(template)
    LOGGER.warning(template, *args)
