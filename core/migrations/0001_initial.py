import django.contrib.auth.models
import django.contrib.auth.validators
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

	initial = True

	dependencies = [
		('auth', '0012_alter_user_first_name_max_length'),
	]

	operations = [
		migrations.CreateModel(
			name='User',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('password', models.CharField(max_length=128, verbose_name='password')),
				('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
				('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
				('username', models.CharField(error_messages={'unique': 'A user with that username already exists.'}, help_text='Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.', max_length=150, unique=True, validators=[django.contrib.auth.validators.UnicodeUsernameValidator()], verbose_name='username')),
				('first_name', models.CharField(blank=True, max_length=150, verbose_name='first name')),
				('last_name', models.CharField(blank=True, max_length=150, verbose_name='last name')),
				('email', models.EmailField(blank=True, max_length=254, verbose_name='email address')),
				('is_staff', models.BooleanField(default=False, help_text='Designates whether the user can log into this admin site.', verbose_name='staff status')),
				('is_active', models.BooleanField(default=True, help_text='Designates whether this user should be treated as active. Unselect this instead of deleting accounts.', verbose_name='active')),
				('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('updated_at', models.DateTimeField(auto_now=True)),
				('phone_country_code', models.CharField(blank=True, help_text="User's cellphone country code", max_length=8)),
				('phone_number', models.CharField(blank=True, help_text="User's cellphone number", max_length=31)),
				('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
				('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
			],
			options={
				'verbose_name': 'user',
				'verbose_name_plural': 'users',
				'abstract': False,
			},
			managers=[
				('objects', django.contrib.auth.models.UserManager()),
			],
		),
		migrations.CreateModel(
			name='League',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('name', models.CharField(max_length=100)),
				('external_id', models.CharField(blank=True, help_text='League id on the host platform', max_length=50)),
				('salary_cap', models.DecimalField(decimal_places=2, default=Decimal('500'), max_digits=10)),
				('trade_approval_mode', models.CharField(choices=[('auto', 'Auto'), ('commissioner', 'Commissioner'), ('league_vote', 'League Vote')], default='auto', max_length=20)),
				('league_vote_window_hours', models.PositiveIntegerField(blank=True, null=True)),
				('veto_threshold', models.DecimalField(blank=True, decimal_places=3, help_text='Fraction of eligible voters needed to veto a trade', max_digits=4, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0')), django.core.validators.MaxValueValidator(Decimal('1'))])),
				('total_rosters', models.PositiveIntegerField(blank=True, null=True)),
				('current_season', models.PositiveIntegerField()),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('updated_at', models.DateTimeField(auto_now=True)),
			],
			options={
				'ordering': ('name',),
			},
		),
		migrations.CreateModel(
			name='Player',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('full_name', models.CharField(max_length=150)),
				('position', models.CharField(choices=[('QB', 'Quarterback'), ('RB', 'Running Back'), ('WR', 'Wide Receiver'), ('TE', 'Tight End'), ('K', 'Kicker'), ('DEF', 'Defense')], max_length=3)),
				('nfl_team', models.CharField(blank=True, help_text='Abbreviation of the real NFL team', max_length=3)),
				('external_id', models.CharField(blank=True, help_text='Player id on the host platform', max_length=20, null=True, unique=True)),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('updated_at', models.DateTimeField(auto_now=True)),
			],
			options={
				'ordering': ('full_name',),
			},
		),
		migrations.CreateModel(
			name='Notification',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('message', models.CharField(max_length=255)),
				('is_read', models.BooleanField(default=False)),
				('priority', models.PositiveIntegerField(default=1, help_text='Priority of the notification, higher number means higher priority')),
				('level', models.CharField(choices=[('info', 'Info'), ('success', 'Success'), ('warning', 'Warning'), ('error', 'Error')], default='info', help_text='Notification level', max_length=10)),
				('redirect_to', models.CharField(blank=True, max_length=255)),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('updated_at', models.DateTimeField(auto_now=True)),
				('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='notifications', to=settings.AUTH_USER_MODEL)),
			],
			options={
				'ordering': ('-created_at',),
			},
		),
		migrations.CreateModel(
			name='Team',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('name', models.CharField(max_length=100)),
				('owner_name', models.CharField(blank=True, help_text='Display name of the manager', max_length=100)),
				('external_roster_id', models.PositiveIntegerField(blank=True, help_text='Roster id on the host platform', null=True)),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('updated_at', models.DateTimeField(auto_now=True)),
				('league', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='teams', to='core.league')),
				('owner', models.ForeignKey(blank=True, help_text='Account that manages this team, if it has signed up', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='teams', to=settings.AUTH_USER_MODEL)),
			],
			options={
				'ordering': ('league', 'name'),
				'unique_together': {('league', 'name')},
			},
		),
		migrations.CreateModel(
			name='LeagueCommissioner',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('league', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='commissioners', to='core.league')),
				('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='commissioner_of', to='core.team')),
			],
			options={
				'unique_together': {('league', 'team')},
			},
		),
		migrations.CreateModel(
			name='Contract',
			fields=[
				('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
				('salary', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
				('years_total', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
				('years_remaining', models.PositiveIntegerField()),
				('start_season', models.PositiveIntegerField()),
				('end_season', models.PositiveIntegerField()),
				('status', models.CharField(choices=[('active', 'Active'), ('released', 'Released'), ('expired', 'Expired')], default='active', max_length=20)),
				('created_at', models.DateTimeField(auto_now_add=True)),
				('updated_at', models.DateTimeField(auto_now=True)),
				('league', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='contracts', to='core.league')),
				('player', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='contracts', to='core.player')),
				('team', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='contracts', to='core.team')),
			],
			options={
				'ordering': ('-salary',),
				'indexes': [models.Index(fields=['team', 'status'], name='contract_team_status_idx'), models.Index(fields=['league', 'status'], name='contract_league_status_idx')],
			},
		),
	]
