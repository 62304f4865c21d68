from rest_framework import serializers

from cap.services.cap_room import get_cap_room

from .models import Contract, League, Notification, Player, Team, User


class UserRegistrationSerializer(serializers.ModelSerializer):
	password = serializers.CharField(
		write_only=True,
		min_length=8,
		help_text="Password must be at least 8 characters long",
	)
	password_confirm = serializers.CharField(write_only=True, help_text="Must match the password field")

	class Meta:
		model = User
		fields = (
			"id",
			"username",
			"email",
			"first_name",
			"last_name",
			"phone_country_code",
			"phone_number",
			"password",
			"password_confirm",
		)

	def validate(self, attrs):
		if attrs["password"] != attrs["password_confirm"]:
			raise serializers.ValidationError("Passwords don't match")
		return attrs

	def create(self, validated_data):
		validated_data.pop("password_confirm")
		password = validated_data.pop("password")
		user = User.objects.create_user(**validated_data)
		user.set_password(password)
		user.save()
		return user


class UserSerializer(serializers.ModelSerializer):
	class Meta:
		model = User
		fields = ("id", "username", "email", "first_name", "last_name", "phone_country_code", "phone_number", "teams")
		read_only_fields = ["id", "teams"]


class LeagueSerializer(serializers.ModelSerializer):
	commissioner_team_ids = serializers.SerializerMethodField(help_text="Teams with commissioner powers")

	class Meta:
		model = League
		fields = "__all__"
		read_only_fields = ["id", "created_at", "updated_at"]

	def get_commissioner_team_ids(self, obj: League) -> list[int]:
		return list(obj.commissioners.values_list("team_id", flat=True))


class SimpleTeamSerializer(serializers.ModelSerializer):
	class Meta:
		model = Team
		fields = ("id", "name", "owner_name", "league")


class TeamSerializer(serializers.ModelSerializer):
	owner_username = serializers.CharField(
		source="owner.username",
		read_only=True,
		default=None,
		help_text="Username of the team owner",
	)
	cap_room = serializers.SerializerMethodField(help_text="Cap room in the league's current season")

	class Meta:
		model = Team
		fields = "__all__"
		read_only_fields = ["id", "created_at", "updated_at", "league", "owner"]

	def get_cap_room(self, obj: Team) -> float:
		return float(get_cap_room(obj, obj.league.current_season))


class StaffTeamSerializer(TeamSerializer):
	"""Team serializer for staff accounts, who place teams in leagues and assign their managers."""

	class Meta(TeamSerializer.Meta):
		read_only_fields = ["id", "created_at", "updated_at"]


class PlayerSerializer(serializers.ModelSerializer):
	class Meta:
		model = Player
		fields = "__all__"
		read_only_fields = ["id", "created_at", "updated_at"]


class ContractSerializer(serializers.ModelSerializer):
	player_name = serializers.CharField(source="player.full_name", read_only=True)
	position = serializers.CharField(source="player.position", read_only=True)
	team_name = serializers.CharField(source="team.name", read_only=True, default=None)

	class Meta:
		model = Contract
		fields = "__all__"
		read_only_fields = ["id", "created_at", "updated_at"]


class NotificationSerializer(serializers.ModelSerializer):
	class Meta:
		model = Notification
		fields = "__all__"
		read_only_fields = ["id", "user", "message", "level", "priority", "redirect_to", "created_at", "updated_at"]
