from django.apps import AppConfig


class CapConfig(AppConfig):
	default_auto_field = "django.db.models.BigAutoField"
	name = "cap"
	verbose_name = "Salary cap ledger"
