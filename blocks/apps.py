from django.apps import AppConfig


class BlocksConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'blocks'

    def ready(self):
        """Build the custom element registry so configuration errors stop startup."""
        from blocks.conversion.registry import get_default_registry

        get_default_registry()
