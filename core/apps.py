from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
    verbose_name = 'Internship Reports'
    
    def ready(self):
        """Import signal handlers and report templates when the app is ready."""
        # Change log for report events
        import core.services.reports.signals  # noqa: F401
        # Registers the PDF templates with the report registry
        import reports  # noqa: F401
