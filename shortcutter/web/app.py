"""Flask application serving the homepage, shortcut submissions and redirects.

A single view, `dispatch`, answers every path:

    POST /          -> 200 homepage with the new short link or an error
    *    /          -> 200 homepage, empty result (any other method)
    *    /<code>    -> 301 redirect to the stored URL, or
                       200 homepage with "Url bad formatted" / "Shortcut not found"

Unexpected failures (template rendering included) are logged and answered
with a plain-text 500. The process keeps serving.

Example:
    >>> app = create_app(ShortcutService(dao=ShortcutRedisDAO(), domain='localhost:8080'))
    >>> app.test_client().post('/', data={'url': 'example.com'}).status_code
    200
"""

import logging

from flask import Flask, current_app, redirect, render_template, request

from shortcutter.constants import Event
from shortcutter.models import SubmissionResult
from shortcutter.service import ShortcutService
from shortcutter.dao.exceptions import DataStoreError, ShortcutNotFoundError
from shortcutter.exceptions import InvalidPathError, InvalidURLError
from shortcutter.types import AppConfig
from shortcutter.utils.helpers import guarantee_500_response


logger = logging.getLogger(__name__)

EXTENSION_KEY = 'shortcutter'
HOMEPAGE_TEMPLATE = 'homepage.html'

# Every path answers every method; only POST / submits
ROUTED_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def create_app(service: ShortcutService, config: AppConfig | None = None) -> Flask:
    """Build the Flask application around an already constructed service

    Args:
        service (ShortcutService):
            Shortener shared by every request handled by this app.
        config (AppConfig | None):
            Optional application configuration, exposed as `app.config['SHORTCUTTER']`.

    Returns:
        Flask: WSGI application.
    """
    # No static route: every path must reach the dispatcher
    app = Flask(__name__, static_folder=None)
    app.config['SHORTCUTTER'] = config or {}
    app.extensions[EXTENSION_KEY] = service

    app.add_url_rule('/', view_func=dispatch, methods=ROUTED_METHODS, defaults={'path': ''})
    app.add_url_rule('/<path:path>', view_func=dispatch, methods=ROUTED_METHODS)
    return app


@guarantee_500_response
def dispatch(path: str):
    """Route a request to submission, empty homepage or shortcut lookup"""
    service: ShortcutService = current_app.extensions[EXTENSION_KEY]

    if request.path == '/':
        if request.method == 'POST':
            result = submit(service)
        else:
            result = SubmissionResult.empty()
        return render_homepage(result)

    return lookup(service, request.path)


def submit(service: ShortcutService) -> SubmissionResult:
    # Form body takes precedence over the query string
    url = request.form.get('url', request.args.get('url', ''))

    try:
        shortcut = service.create_new_shortcut(url)
    except InvalidURLError as e:
        logger.info('Rejected invalid url input.', extra={'event': Event.INVALID_URL_INPUT, 'url': url})
        return SubmissionResult.failure(str(e))
    except DataStoreError as e:
        logger.error('Failed to store shortcut mapping.', extra={'event': Event.STORE_WRITE_FAILED, 'url': url})
        return SubmissionResult.failure(str(e))

    link = service.short_link(shortcut)
    logger.info('Shortcut created.', extra={'event': Event.SHORTCUT_CREATED, 'shortcut': shortcut, 'link': link})
    return SubmissionResult.success(link)


def lookup(service: ShortcutService, path: str):
    try:
        target = service.check_shortcut(path)
    except InvalidPathError as e:
        logger.info('Requested path is not a shortcut.', extra={'event': Event.URL_BAD_FORMATTED, 'path': path})
        return render_homepage(SubmissionResult.failure(str(e)))
    except ShortcutNotFoundError as e:
        logger.info('Shortcut not found.', extra={'event': Event.SHORTCUT_NOT_FOUND, 'shortcut': path})
        return render_homepage(SubmissionResult.failure(str(e)))

    logger.info('Redirecting client to target URL. Responding with 301.', extra={'event': Event.REDIRECT_SUCCESS, 'shortcut': path})
    return redirect(target, code=301)


def render_homepage(result: SubmissionResult) -> str:
    logger.debug('Rendering homepage.', extra={'event': Event.HOMEPAGE_RENDERED, 'ok': result.ok, 'failed': result.failed})
    return render_template(HOMEPAGE_TEMPLATE, result=result)
