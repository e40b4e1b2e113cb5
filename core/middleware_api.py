"""
API Authentication Middleware for the Reports API.

This middleware provides authentication for the JSON reports API
using a secret token passed in the x-api-secret header.
"""
import logging
from django.http import JsonResponse

from core.services.config import get_api_secret
from core.services.exceptions import ServiceNotConfigured

logger = logging.getLogger(__name__)

API_PREFIX = '/api/reports/'


class ReportsAPIAuthMiddleware:
    """
    Middleware that enforces x-api-secret authentication for the reports API.
    
    This middleware checks for the x-api-secret header and validates it against
    the INTERNTRACK_API_SECRET environment variable, read on every request so
    a rotated secret applies without a restart.
    """
    
    def __init__(self, get_response):
        self.get_response = get_response
        
    def __call__(self, request):
        if self._is_api_endpoint(request.path):
            provided_secret = request.META.get('HTTP_X_API_SECRET', '')
            
            try:
                api_secret = get_api_secret()
            except ServiceNotConfigured:
                logger.error("INTERNTRACK_API_SECRET not configured in environment")
                return JsonResponse(
                    {'success': False, 'error': 'API authentication not configured'},
                    status=500
                )
            
            if not provided_secret or provided_secret != api_secret:
                # Never log the secret values
                logger.warning(
                    f"Unauthorized API request to {request.path} from {request.META.get('REMOTE_ADDR', 'unknown')}"
                )
                return JsonResponse(
                    {'success': False, 'error': 'Unauthorized. Invalid or missing x-api-secret header.'},
                    status=401
                )
        
        return self.get_response(request)
    
    def _is_api_endpoint(self, path):
        """
        Check if the path is a reports API endpoint that requires authentication.
        
        Args:
            path: Request path
            
        Returns:
            True if this is an API endpoint, False otherwise
        """
        return path.startswith(API_PREFIX) or path == API_PREFIX.rstrip('/')
