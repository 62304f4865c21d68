from rest_framework import serializers

from core.serializers import SimpleTeamSerializer
from dynasty.settings import LEAGUE_SETTINGS
from trade.enums.asset_kinds import AssetKinds
from trade.enums.trade_actions import TradeActions
from trade.models import Trade, TradeAsset, TradeParticipant, TradeVote
from trade.services.history import describe_received_item
from trade.types.history_items import ReceivedItem


class TradeParticipantSerializer(serializers.ModelSerializer):
	team = SimpleTeamSerializer(read_only=True)
	receives = serializers.SerializerMethodField(help_text="Assets this team gets if the trade executes")

	class Meta:
		model = TradeParticipant
		fields = ("team", "status", "accepted_at", "responded_at", "receives")

	def get_receives(self, obj: TradeParticipant) -> list[ReceivedItem]:
		return [describe_received_item(asset) for asset in obj.trade.assets.all() if asset.to_team_id == obj.team_id]


class TradeAssetSerializer(serializers.ModelSerializer):
	from_team_name = serializers.CharField(source="from_team.name", read_only=True)
	to_team_name = serializers.CharField(source="to_team.name", read_only=True)
	description = serializers.SerializerMethodField(help_text="What the asset is, in words")

	class Meta:
		model = TradeAsset
		fields = (
			"id",
			"asset_type",
			"from_team",
			"from_team_name",
			"to_team",
			"to_team_name",
			"contract",
			"draft_pick",
			"cap_amount",
			"cap_year",
			"description",
		)

	def get_description(self, obj: TradeAsset) -> str:
		if obj.asset_type == AssetKinds.CONTRACT:
			return f"{obj.contract.player.full_name} (${obj.contract.salary}, {obj.contract.years_remaining} yrs)"

		if obj.asset_type == AssetKinds.DRAFT_PICK:
			pick = obj.draft_pick
			return f"{pick.season} {pick.round_label} round pick ({pick.original_team.name})"

		return f"${obj.cap_amount} cap space in {obj.cap_year}"


class TradeVoteSerializer(serializers.ModelSerializer):
	team_name = serializers.CharField(source="team.name", read_only=True)

	class Meta:
		model = TradeVote
		fields = ("team", "team_name", "vote", "voted_at")


class TradeSerializer(serializers.ModelSerializer):
	proposer = SimpleTeamSerializer(read_only=True)
	participants = TradeParticipantSerializer(many=True, read_only=True)
	assets = TradeAssetSerializer(many=True, read_only=True)
	votes = TradeVoteSerializer(many=True, read_only=True)
	is_terminal = serializers.BooleanField(read_only=True)

	class Meta:
		model = Trade
		exclude = ("teams",)


class ProposedAssetSerializer(serializers.Serializer):
	from_team_id = serializers.IntegerField()
	to_team_id = serializers.IntegerField()
	asset_type = serializers.ChoiceField(choices=AssetKinds.choices())
	contract_id = serializers.IntegerField(required=False)
	draft_pick_id = serializers.IntegerField(required=False)
	cap_amount = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
	cap_year = serializers.IntegerField(required=False)


class TradeProposalSerializer(serializers.Serializer):
	league_id = serializers.IntegerField()
	team_ids = serializers.ListField(child=serializers.IntegerField(), min_length=2)
	assets = ProposedAssetSerializer(many=True, allow_empty=False)
	proposer_team_id = serializers.IntegerField(required=False)
	expires_in = serializers.CharField(
		required=False,
		default=LEAGUE_SETTINGS.DEFAULT_EXPIRES_IN,
		help_text="One of 1h, 24h, 2d or 1w; anything else means 24h",
	)
	notes = serializers.CharField(required=False, allow_blank=True, default="")


class TradeActionSerializer(serializers.Serializer):
	action = serializers.ChoiceField(choices=TradeActions.choices())
	trade_id = serializers.IntegerField()
	team_id = serializers.IntegerField(required=False)
	vote = serializers.CharField(required=False)
