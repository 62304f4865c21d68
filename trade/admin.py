from django.contrib import admin

from .models import Trade, TradeAsset, TradeHistoryRecord, TradeParticipant, TradeVote


class TradeParticipantInline(admin.TabularInline):
	model = TradeParticipant
	extra = 0
	readonly_fields = ["team", "status", "accepted_at", "responded_at"]


class TradeAssetInline(admin.TabularInline):
	model = TradeAsset
	extra = 0
	readonly_fields = ["from_team", "to_team", "asset_type", "contract", "draft_pick", "cap_amount", "cap_year"]


class TradeVoteInline(admin.TabularInline):
	model = TradeVote
	extra = 0
	readonly_fields = ["team", "vote", "voted_at"]


class TradeAdmin(admin.ModelAdmin):
	list_display = ["id", "league", "proposer", "status", "approval_mode", "created_at"]
	list_filter = ["league", "status", "approval_mode"]
	readonly_fields = [
		"approval_mode",
		"requires_commissioner_approval",
		"requires_league_vote",
		"vote_window_hours",
		"veto_fraction",
		"votes_for",
		"votes_against",
	]
	inlines = [TradeParticipantInline, TradeAssetInline, TradeVoteInline]


class TradeHistoryRecordAdmin(admin.ModelAdmin):
	list_display = ["trade_number", "league", "team1_name", "team2_name", "trade_date"]
	list_filter = ["league", "trade_year"]


admin.site.register(Trade, TradeAdmin)
admin.site.register(TradeHistoryRecord, TradeHistoryRecordAdmin)
