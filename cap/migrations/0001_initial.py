import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

	initial = True

	dependencies = [
		('core', '0001_initial'),
		('trade', '0001_initial'),
	]

	operations = [
		migrations.CreateModel(
			name='CapLedgerEntry',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('season', models.PositiveIntegerField()),
				('transaction_type', models.CharField(choices=[('contract_traded_out', 'Contract Traded Out'), ('contract_traded_in', 'Contract Traded In'), ('trade_cap_hit', 'Trade Cap Hit'), ('trade_cap_credit', 'Trade Cap Credit'), ('dead_money', 'Dead Money')], max_length=30)),
				('amount', models.DecimalField(decimal_places=2, max_digits=10)),
				('description', models.TextField(blank=True)),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('contract', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='cap_entries', to='core.contract')),
				('league', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='cap_entries', to='core.league')),
				('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='cap_entries', to='core.team')),
				('trade', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='cap_entries', to='trade.trade')),
			],
			options={
				'verbose_name': 'Cap Ledger Entry',
				'verbose_name_plural': 'Cap Ledger Entries',
				'ordering': ('created_at', 'id'),
				'indexes': [models.Index(fields=['team', 'season'], name='cap_ledger_team_season_idx'), models.Index(fields=['league', 'season'], name='cap_ledger_league_season_idx'), models.Index(fields=['trade'], name='cap_ledger_trade_idx')],
			},
		),
	]
