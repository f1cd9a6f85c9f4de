from django.apps import AppConfig


class UsersConfig(AppConfig):
    """
    Configuration for the Users app.
    Provides the custom email-based user model.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'users'
    verbose_name = 'User Accounts'
