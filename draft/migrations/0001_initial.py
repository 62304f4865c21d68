import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

	initial = True

	dependencies = [
		('core', '0001_initial'),
	]

	operations = [
		migrations.CreateModel(
			name='Pick',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('season', models.PositiveIntegerField()),
				('round_number', models.PositiveIntegerField()),
				('pick_number', models.PositiveIntegerField(blank=True, help_text='Slot within the round, once known', null=True)),
				('is_used', models.BooleanField(default=False, help_text='Pick has been converted into a rookie contract')),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('updated_at', models.DateTimeField(auto_now=True)),
				('current_team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='current_picks', to='core.team')),
				('league', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='picks', to='core.league')),
				('original_team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='original_picks', to='core.team')),
				('used_for_contract', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='drafted_with', to='core.contract')),
			],
			options={
				'ordering': ('season', 'round_number', 'pick_number'),
				'indexes': [models.Index(fields=['season', 'current_team'], name='pick_season_owner_idx')],
				'unique_together': {('original_team', 'season', 'round_number')},
			},
		),
	]
