"""
Health check handlers for API routes.
"""

import time
from .common import create_success_response, get_services


def handle_health_check():
    """Handler for API health check endpoint"""
    return create_success_response({
        'status': 'healthy',
        'auth': get_services().auth.describe(),
        'timestamp': time.time(),
    })
