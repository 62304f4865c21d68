import django.core.serializers.json
import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

	initial = True

	dependencies = [
		('core', '0001_initial'),
		('draft', '0001_initial'),
	]

	operations = [
		migrations.CreateModel(
			name='Trade',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('status', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('completed', 'Completed'), ('rejected', 'Rejected'), ('cancelled', 'Cancelled'), ('expired', 'Expired')], default='pending', max_length=20)),
				('notes', models.TextField(blank=True)),
				('approval_mode', models.CharField(choices=[('auto', 'Auto'), ('commissioner', 'Commissioner'), ('league_vote', 'League Vote')], max_length=20)),
				('requires_commissioner_approval', models.BooleanField(default=False)),
				('requires_league_vote', models.BooleanField(default=False)),
				('vote_window_hours', models.PositiveIntegerField()),
				('veto_fraction', models.DecimalField(decimal_places=3, max_digits=4, validators=[django.core.validators.MinValueValidator(Decimal('0')), django.core.validators.MaxValueValidator(Decimal('1'))])),
				('expires_at', models.DateTimeField()),
				('vote_deadline', models.DateTimeField(blank=True, null=True)),
				('votes_for', models.PositiveIntegerField(default=0)),
				('votes_against', models.PositiveIntegerField(default=0)),
				('commissioner_approved_at', models.DateTimeField(blank=True, null=True)),
				('completed_at', models.DateTimeField(blank=True, null=True)),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('updated_at', models.DateTimeField(auto_now=True)),
				('commissioner_approved_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='trades_approved', to='core.team')),
				('league', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='trades', to='core.league')),
				('proposer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='trades_proposed', to='core.team')),
			],
			options={
				'ordering': ('-created_at', '-id'),
			},
		),
		migrations.CreateModel(
			name='TradeParticipant',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('status', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('rejected', 'Rejected')], default='pending', max_length=20)),
				('accepted_at', models.DateTimeField(blank=True, null=True)),
				('responded_at', models.DateTimeField(blank=True, null=True)),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='trade_participations', to='core.team')),
				('trade', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='participants', to='trade.trade')),
			],
			options={
				'ordering': ('id',),
				'indexes': [models.Index(fields=['team', 'status'], name='trade_participant_status_idx')],
				'unique_together': {('trade', 'team')},
			},
		),
		migrations.AddField(
			model_name='trade',
			name='teams',
			field=models.ManyToManyField(related_name='trades', through='trade.TradeParticipant', to='core.team'),
		),
		migrations.AddIndex(
			model_name='trade',
			index=models.Index(fields=['league', 'status'], name='trade_league_status_idx'),
		),
		migrations.AddIndex(
			model_name='trade',
			index=models.Index(fields=['status', 'expires_at'], name='trade_status_expiry_idx'),
		),
		migrations.CreateModel(
			name='TradeAsset',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('asset_type', models.CharField(choices=[('contract', 'Contract'), ('draft_pick', 'Draft Pick'), ('cap_space', 'Cap Space')], max_length=20)),
				('cap_amount', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
				('cap_year', models.PositiveIntegerField(blank=True, null=True)),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('contract', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='trade_assets', to='core.contract')),
				('draft_pick', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='trade_assets', to='draft.pick')),
				('from_team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='trade_assets_sent', to='core.team')),
				('to_team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='trade_assets_received', to='core.team')),
				('trade', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assets', to='trade.trade')),
			],
			options={
				'ordering': ('id',),
				'indexes': [models.Index(fields=['from_team', 'to_team'], name='trade_asset_teams_idx')],
				'constraints': [models.CheckConstraint(condition=models.Q(models.Q(('asset_type', 'contract'), ('contract__isnull', False), ('draft_pick__isnull', True), ('cap_amount__isnull', True), ('cap_year__isnull', True)), models.Q(('asset_type', 'draft_pick'), ('contract__isnull', True), ('draft_pick__isnull', False), ('cap_amount__isnull', True), ('cap_year__isnull', True)), models.Q(('asset_type', 'cap_space'), ('contract__isnull', True), ('draft_pick__isnull', True), ('cap_amount__gt', 0), ('cap_year__isnull', False)), _connector='OR'), name='trade_asset_matches_kind')],
			},
		),
		migrations.CreateModel(
			name='TradeVote',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('vote', models.CharField(choices=[('approve', 'Approve'), ('veto', 'Veto')], max_length=10)),
				('voted_at', models.DateTimeField(auto_now=True)),
				('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='trade_votes', to='core.team')),
				('trade', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='votes', to='trade.trade')),
			],
			options={
				'ordering': ('voted_at',),
				'unique_together': {('trade', 'team')},
			},
		),
		migrations.CreateModel(
			name='TradeHistoryRecord',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('trade_number', models.CharField(max_length=10)),
				('trade_year', models.PositiveIntegerField()),
				('team1_name', models.CharField(max_length=100)),
				('team1_received', models.JSONField(default=list, encoder=django.core.serializers.json.DjangoJSONEncoder)),
				('team2_name', models.CharField(max_length=100)),
				('team2_received', models.JSONField(default=list, encoder=django.core.serializers.json.DjangoJSONEncoder)),
				('trade_date', models.DateField()),
				('notes', models.TextField(blank=True)),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('league', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='trade_history', to='core.league')),
				('team1', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='core.team')),
				('team2', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='core.team')),
				('trade', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='history_record', to='trade.trade')),
			],
			options={
				'ordering': ('-trade_year', '-created_at', '-id'),
				'indexes': [models.Index(fields=['league', 'trade_year'], name='trade_history_year_idx')],
				'unique_together': {('league', 'trade_number')},
			},
		),
	]
