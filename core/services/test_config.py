"""
Tests for the core configuration service layer.
"""

import os
import tempfile
from unittest import mock

from django.test import TestCase, override_settings

from core.services import config
from core.services.exceptions import ServiceError, ServiceNotConfigured


class ConfigServiceTestCase(TestCase):
    """Test cases for the configuration service layer."""
    
    @override_settings(INTERNTRACK_UNIT_CODE='ICT30001')
    def test_get_unit_code_from_settings(self):
        """Test that the unit code comes from settings."""
        self.assertEqual(config.get_unit_code(), 'ICT30001')
    
    @override_settings(INTERNTRACK_UNIT_CODE='')
    def test_get_unit_code_default(self):
        """Test that an empty unit code falls back to the default."""
        self.assertEqual(config.get_unit_code(), config.DEFAULT_UNIT_CODE)
    
    @override_settings(INTERNTRACK_LOGO_PATH='')
    def test_get_logo_path_not_configured(self):
        """Test that no logo is returned when none is configured."""
        self.assertIsNone(config.get_logo_path())
    
    @override_settings(INTERNTRACK_LOGO_PATH='/nonexistent/logo.png')
    def test_get_logo_path_missing_file(self):
        """Test that a configured but missing logo is ignored."""
        with self.assertLogs('core.services.config', level='WARNING'):
            self.assertIsNone(config.get_logo_path())
    
    def test_get_logo_path_existing_file(self):
        """Test that an existing logo file is returned."""
        with tempfile.NamedTemporaryFile(suffix='.png') as logo:
            with override_settings(INTERNTRACK_LOGO_PATH=logo.name):
                self.assertEqual(str(config.get_logo_path()), logo.name)
    
    @mock.patch.dict(os.environ, {'INTERNTRACK_API_SECRET': 'test-secret-123'})
    def test_get_api_secret(self):
        """Test that the API secret is read from the environment."""
        self.assertEqual(config.get_api_secret(), 'test-secret-123')
    
    @mock.patch.dict(os.environ, {}, clear=True)
    def test_get_api_secret_not_configured(self):
        """Test that a missing API secret raises ServiceNotConfigured."""
        with self.assertRaises(ServiceNotConfigured):
            config.get_api_secret()
    
    def test_service_not_configured_is_service_error(self):
        """Test the exception hierarchy."""
        self.assertTrue(issubclass(ServiceNotConfigured, ServiceError))
