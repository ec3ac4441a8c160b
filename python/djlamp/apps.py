from django.apps import AppConfig


class DjlampConfig(AppConfig):
    name = "djlamp"
    verbose_name = "djlamp fixtures"
    default_auto_field = "django.db.models.BigAutoField"
