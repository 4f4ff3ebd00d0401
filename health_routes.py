"""Flask routes for health monitoring."""

import os
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List

from flask import Blueprint, current_app, jsonify

from page_renderer import NOTICE_TEMPLATE

SERVICE_NAME = 'gomenasai incident notice'


class HealthStatus(Enum):
    """Health status enumeration."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass
class HealthResult:
    """Result of a health check."""
    name: str
    status: HealthStatus
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'status': self.status.value,
            'message': self.message,
            'details': self.details,
        }


def check_template(templates_dir: str) -> HealthResult:
    """The notice cannot be served without its template."""
    path = os.path.join(templates_dir, NOTICE_TEMPLATE)
    if os.path.isfile(path):
        return HealthResult('template', HealthStatus.HEALTHY, 'Notice template present')
    return HealthResult('template', HealthStatus.UNHEALTHY, 'Notice template missing', {'path': path})


def check_assets(assets_dir: str) -> HealthResult:
    """Missing assets only degrade the page."""
    if os.path.isdir(assets_dir):
        return HealthResult('assets', HealthStatus.HEALTHY, 'Assets directory present')
    return HealthResult('assets', HealthStatus.DEGRADED, 'Assets directory missing', {'path': assets_dir})


def overall_status(results: List[HealthResult]) -> HealthStatus:
    """Worst status wins."""
    statuses = {r.status for r in results}
    if HealthStatus.UNHEALTHY in statuses:
        return HealthStatus.UNHEALTHY
    if HealthStatus.DEGRADED in statuses:
        return HealthStatus.DEGRADED
    return HealthStatus.HEALTHY


def create_health_blueprint(templates_dir: str, assets_dir: str) -> Blueprint:
    """
    Build the health blueprint.

    Responses never mention the incident itself, so probes cannot be used to
    learn about a notice outside its disclosure window.

    Args:
        templates_dir: Directory the page renderer loads templates from
        assets_dir: Directory served under /assets
    """
    health_bp = Blueprint('health', __name__, url_prefix='/api/health')

    @health_bp.route('/')
    @health_bp.route('')
    def basic_health():
        """Basic health check endpoint."""
        return jsonify({
            'status': HealthStatus.HEALTHY.value,
            'service': SERVICE_NAME,
            'timestamp': datetime.now().isoformat()
        })

    @health_bp.route('/live')
    def liveness_probe():
        """Kubernetes liveness probe."""
        return jsonify({
            'status': HealthStatus.HEALTHY.value,
            'timestamp': datetime.now().isoformat()
        })

    @health_bp.route('/ready')
    def readiness_probe():
        """Kubernetes readiness probe."""
        results = [check_template(templates_dir), check_assets(assets_dir)]
        status = overall_status(results)
        if status == HealthStatus.UNHEALTHY:
            current_app.logger.warning(f"Readiness check failed: {[r.message for r in results]}")

        body = {
            'status': 'not_ready' if status == HealthStatus.UNHEALTHY else 'ready',
            'checks': {r.name: r.to_dict() for r in results},
            'timestamp': datetime.now().isoformat()
        }
        return jsonify(body), 503 if status == HealthStatus.UNHEALTHY else 200

    return health_bp
