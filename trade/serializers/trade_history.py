from rest_framework import serializers

from trade.models import TradeHistoryRecord


class TradeHistoryRecordSerializer(serializers.ModelSerializer):
	class Meta:
		model = TradeHistoryRecord
		fields = (
			"id",
			"league",
			"trade",
			"trade_number",
			"trade_year",
			"team1",
			"team1_name",
			"team1_received",
			"team2",
			"team2_name",
			"team2_received",
			"trade_date",
			"notes",
		)
		read_only_fields = fields
