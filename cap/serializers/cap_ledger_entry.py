from rest_framework import serializers

from cap.models import CapLedgerEntry


class CapLedgerEntrySerializer(serializers.ModelSerializer):
	team_name = serializers.CharField(source="team.name", read_only=True)

	class Meta:
		model = CapLedgerEntry
		fields = "__all__"
		read_only_fields = [field.name for field in CapLedgerEntry._meta.fields]


class CapSummarySerializer(serializers.Serializer):
	team_id = serializers.IntegerField()
	season = serializers.IntegerField()
	salary_cap = serializers.DecimalField(max_digits=10, decimal_places=2)
	committed_salary = serializers.DecimalField(max_digits=10, decimal_places=2)
	dead_money = serializers.DecimalField(max_digits=10, decimal_places=2)
	cap_used = serializers.DecimalField(max_digits=10, decimal_places=2)
	cap_room = serializers.DecimalField(max_digits=10, decimal_places=2)
