from django.apps import AppConfig


class UsersConfig(AppConfig):
    """
    Identity scaffolding: the user model, login pages and token endpoints.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'users'
    verbose_name = 'Users'
