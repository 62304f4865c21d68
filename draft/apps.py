from django.apps import AppConfig


class DraftConfig(AppConfig):
	default_auto_field = "django.db.models.BigAutoField"
	name = "draft"
	verbose_name = "Draft picks"
