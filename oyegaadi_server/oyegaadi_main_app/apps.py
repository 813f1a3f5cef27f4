from django.apps import AppConfig


class OyegaadiMainAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'oyegaadi_main_app'

    def ready(self):
        import oyegaadi_main_app.signals  # noqa: F401  Register signals
