from django.apps import AppConfig

class RecipesConfig(AppConfig):
    """Django app config for recipes; loads signal handlers and checks on ready."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'recipes'

    def ready(self):
        """Import signal and check modules to register handlers."""
        import recipes.signals
        import recipes.checks
