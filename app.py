"""
Flask Web Application for the gomenasai incident notice.

Serves the security-incident notice page at the configured endpoint, but only
while the disclosure window is open. Outside the window the endpoint answers
404 exactly like any unknown path.
"""

from datetime import datetime, timezone
from typing import Callable, Optional
import logging
from logging.handlers import RotatingFileHandler
import os

from flask import Flask, Response
from flask_talisman import Talisman

from breach_selector import select_breach_categories
from config import AppConfig, get_config
from disclosure_gate import is_open
from errors import RenderError
from health_routes import create_health_blueprint
from models import IncidentConfiguration
from page_renderer import PageRenderer

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = "404 Not found.\n"
CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'


def utc_now() -> datetime:
    """Default request clock."""
    return datetime.now(timezone.utc)


def setup_logging(level: str, settings: Optional[AppConfig] = None) -> logging.Logger:
    """
    Configure process-wide logging: console plus a rotating log file.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        level: Level name (debug, info, warning, error, critical)
        settings: Application configuration; the global one when omitted

    Returns:
        The root logger
    """
    settings = settings or get_config()
    log_level = getattr(logging, level.upper())

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in [h for h in root.handlers if getattr(h, '_gomenasai', False)]:
        root.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler._gomenasai = True
    root.addHandler(console_handler)

    # File handler for production (if not in testing mode)
    if not settings.testing:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.log_file,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler._gomenasai = True
        root.addHandler(file_handler)

    logger.info('Setup log finished.')
    return root


def create_app(incident_config: IncidentConfiguration,
               settings: Optional[AppConfig] = None,
               clock: Optional[Callable[[], datetime]] = None) -> Flask:
    """
    Build the Flask application for one incident.

    Args:
        incident_config: Loaded incident configuration (read-only)
        settings: Application configuration; the global one when omitted
        clock: Returns the current aware datetime; UTC wall clock by default

    Returns:
        Configured Flask application
    """
    settings = settings or get_config()
    clock = clock or utc_now

    app = Flask(
        __name__,
        static_folder=os.path.abspath(settings.assets_dir),
        static_url_path='/assets',
    )
    app.config['TESTING'] = settings.testing

    renderer = PageRenderer(settings.templates_dir, settings.display_timezone)
    app.page_renderer = renderer

    # Configure HTTPS enforcement with Talisman (disabled in debug/testing mode)
    if not settings.testing and not settings.flask_debug and settings.https_enabled:
        Talisman(
            app,
            force_https=True,
            strict_transport_security=True,
            strict_transport_security_max_age=31536000,  # 1 year
            content_security_policy={
                'default-src': ["'self'"],
                'style-src': ["'self'"],
                'img-src': ["'self'", 'data:'],
            },
        )
        logger.info('HTTPS enforcement enabled with Talisman')
    else:
        logger.debug('HTTPS enforcement disabled')

    app.register_blueprint(create_health_blueprint(settings.templates_dir, settings.assets_dir))

    def show_page():
        """Serve the notice page while the disclosure window is open."""
        now = clock()
        logger.debug(f"Current time is {now}")

        if not is_open(incident_config.window, now):
            logger.info(
                f"Current time is out of date. (start={incident_config.start}, end={incident_config.end})"
            )
            return Response(NOT_FOUND_BODY, status=404, mimetype='text/plain')

        categories = select_breach_categories(incident_config.breach)
        try:
            body = renderer.render(incident_config, categories)
        except RenderError as e:
            logger.error(f"Failed to render notice page: {e}")
            return Response(f"{e}\n", status=500, mimetype='text/plain')

        return Response(body, status=200, content_type='text/html; charset=utf-8')

    app.add_url_rule(incident_config.web.endpoint, 'notice', show_page, methods=['GET'])

    @app.errorhandler(404)
    def not_found(error):
        return Response(NOT_FOUND_BODY, status=404, mimetype='text/plain')

    @app.errorhandler(500)
    def internal_error(error):
        return Response("500 Internal server error.\n", status=500, mimetype='text/plain')

    logger.info(f"Notice endpoint registered at {incident_config.web.endpoint}")
    return app
