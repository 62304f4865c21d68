from django.contrib import admin

from .models import Pick


class PickAdmin(admin.ModelAdmin):
	list_display = ["__str__", "original_team", "current_team", "season", "round_number", "is_used"]
	list_filter = ["league", "season", "round_number"]
	search_fields = ["original_team__name", "current_team__name"]


admin.site.register(Pick, PickAdmin)
