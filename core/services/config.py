"""
Core configuration service for InternTrack.

This module provides a centralized configuration layer that:
- Reads InternTrack settings with sensible defaults
- Resolves optional assets such as the institution logo

Services should use these accessors rather than reading settings directly.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from django.conf import settings

from .exceptions import ServiceNotConfigured

logger = logging.getLogger(__name__)

DEFAULT_UNIT_CODE = "ICT80004"


def get_unit_code() -> str:
    """
    Get the unit code printed on exported reports.

    Returns:
        Unit code (e.g., 'ICT80004')
    """
    return getattr(settings, 'INTERNTRACK_UNIT_CODE', '') or DEFAULT_UNIT_CODE


def get_logo_path() -> Optional[Path]:
    """
    Get the institution logo drawn in the PDF header.

    Returns:
        Path to an existing image file, or None if no logo is configured
        or the configured file does not exist
    """
    configured = getattr(settings, 'INTERNTRACK_LOGO_PATH', '')
    if not configured:
        return None

    path = Path(configured)
    if not path.is_file():
        logger.warning(f"Configured logo not found: {path}")
        return None
    return path


def get_api_secret() -> str:
    """
    Get the shared secret expected in the x-api-secret header.

    Returns:
        The API secret

    Raises:
        ServiceNotConfigured: If INTERNTRACK_API_SECRET is not set
    """
    secret = os.environ.get('INTERNTRACK_API_SECRET', '')
    if not secret:
        raise ServiceNotConfigured("INTERNTRACK_API_SECRET is not configured")
    return secret
