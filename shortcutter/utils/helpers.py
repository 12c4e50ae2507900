"""Helper utilities for the web layer.

Functions:
    join_short_link(domain: str, shortcut: str) -> str
        Get string representation of a short link for a given shortcut
    guarantee_500_response(view: Callable) -> Callable
        Decorator: answer unexpected view failures with a generic 500 response

Example:
    >>> from shortcutter.utils.helpers import join_short_link
    >>> join_short_link('localhost:8080', '/1a2b3c4d')
    'localhost:8080/1a2b3c4d'
    >>> join_short_link('https://sho.rt/', '/1a2b3c4d')
    'https://sho.rt/1a2b3c4d'
"""

import functools
import logging
from collections.abc import Callable

from flask import Response
from werkzeug.exceptions import HTTPException

from shortcutter.constants import Event


logger = logging.getLogger(__name__)


def join_short_link(domain: str, shortcut: str) -> str:
    """Get string representation of a short link

    Args:
        domain (str): public-facing domain, e.g. 'localhost:8080' or 'https://sho.rt'
        shortcut (str): short path, e.g. '/1a2b3c4d'

    Returns:
        str: short link string representation
    """
    return f'{domain.rstrip("/")}/{shortcut.lstrip("/")}'


def response_500() -> Response:
    return Response('Internal Server Error', status=500, mimetype='text/plain')


def guarantee_500_response(view: Callable) -> Callable:
    """Decorator: ensure a Flask view answers with 500 instead of crashing

    Any exception escaping the view (template rendering failures included) is
    logged with its traceback and converted into a plain-text 500 response.
    HTTP errors raised by Flask itself (400 on a malformed body, 413, ...) keep
    their own status.
    The process keeps serving subsequent requests.

    Example:
        >>> @guarantee_500_response
        ... def faulty_view():
        ...     raise RuntimeError('boom')
        >>> faulty_view().status_code
        500
    """

    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except HTTPException:
            raise
        except Exception:
            logger.exception(
                'Unexpected failure while handling request. Responding with 500.',
                extra={'event': Event.UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return response_500()

    return wrapper
