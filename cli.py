"""
Command line interface for the gomenasai incident notice service.

Usage:
    gomenasai --bind 0.0.0.0:8000 runserver --conf setting.hcl --verbose debug
"""

import argparse
import logging
import platform
import sys
from typing import List, Optional, Tuple

from app import create_app, setup_logging
from config import get_config
from config_loader import load_incident_config
from errors import ConfigError

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

LOG_LEVELS = ['debug', 'info', 'warning', 'error', 'critical']


def parse_bind(value: str) -> Tuple[str, int]:
    """Split ``HOST:PORT`` for argparse."""
    host, sep, port = value.rpartition(':')
    if not sep or not host or not port.isdigit():
        raise argparse.ArgumentTypeError(f"bind address must look like HOST:PORT, got {value!r}")
    return host, int(port)


def build_parser() -> argparse.ArgumentParser:
    settings = get_config()

    parser = argparse.ArgumentParser(
        prog='gomenasai',
        description='Generate security incident information page.'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--bind', '-b',
                        type=parse_bind,
                        default=(settings.flask_host, settings.flask_port),
                        help=f'HTTP server address (default: {settings.flask_host}:{settings.flask_port})')

    subparsers = parser.add_subparsers(dest='command')

    runserver_parser = subparsers.add_parser('runserver', help='Run http server.')
    runserver_parser.add_argument('--conf', '-c',
                                  default=settings.incident_config_path,
                                  help=f'use configuration file (default: {settings.incident_config_path})')
    runserver_parser.add_argument('--verbose', '-vv',
                                  type=str.lower,
                                  choices=LOG_LEVELS,
                                  default=settings.log_level.lower(),
                                  help='Logger verbose')
    runserver_parser.set_defaults(func=runserver)

    return parser


def runserver(args: argparse.Namespace) -> int:
    """Load the incident configuration and serve it until interrupted."""
    settings = get_config()
    setup_logging(args.verbose, settings)

    try:
        incident_config = load_incident_config(args.conf)
    except ConfigError as e:
        logger.critical(f"Parse config error {e}")
        return 1

    host, port = args.bind
    app = create_app(incident_config, settings)

    logger.info(f"Python runtime version is {platform.python_version()}")
    logger.info(f"Starting gomenasai on http://{host}:{port}{incident_config.web.endpoint}")
    if settings.flask_debug:
        logger.warning('Running in DEBUG mode - not suitable for production!')

    app.run(host=host, port=port, debug=settings.flask_debug, threaded=True)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, 'func', None):
        parser.print_help()
        return 2

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
