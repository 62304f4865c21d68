from django.contrib import admin

from .models import CapLedgerEntry


class CapLedgerEntryAdmin(admin.ModelAdmin):
	list_display = ["team", "season", "transaction_type", "amount", "trade", "created_at"]
	list_filter = ["league", "season", "transaction_type"]
	search_fields = ["team__name", "description"]

	def has_change_permission(self, request, obj=None) -> bool:  # noqa: ANN001, ARG002, D102
		return False

	def has_delete_permission(self, request, obj=None) -> bool:  # noqa: ANN001, ARG002, D102
		return False


admin.site.register(CapLedgerEntry, CapLedgerEntryAdmin)
