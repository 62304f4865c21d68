from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import Contract, League, LeagueCommissioner, Player, Team, User


class UserAdmin(BaseUserAdmin):
	fieldsets = (*BaseUserAdmin.fieldsets, ("Phone", {"fields": ("phone_country_code", "phone_number")}))


class LeagueCommissionerInline(admin.TabularInline):
	model = LeagueCommissioner
	extra = 0


class LeagueAdmin(admin.ModelAdmin):
	list_display = ["name", "current_season", "salary_cap", "trade_approval_mode"]
	inlines = [LeagueCommissionerInline]


class TeamAdmin(admin.ModelAdmin):
	list_display = ["name", "league", "owner_name", "owner"]
	list_filter = ["league"]
	search_fields = ["name", "owner_name", "owner__username"]


class ContractAdmin(admin.ModelAdmin):
	list_display = ["player", "team", "salary", "start_season", "end_season", "status"]
	list_filter = ["league", "status"]
	search_fields = ["player__full_name", "team__name"]


admin.site.register(User, UserAdmin)
admin.site.register(League, LeagueAdmin)
admin.site.register(Team, TeamAdmin)
admin.site.register(Player)
admin.site.register(Contract, ContractAdmin)
