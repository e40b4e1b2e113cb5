# Generated for the initial InternTrack schema

import uuid

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='EndOfTermReport',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('student_name', models.CharField(max_length=255)),
                ('student_id', models.PositiveIntegerField()),
                ('organisation', models.CharField(max_length=255)),
                ('industry_supervisor', models.CharField(max_length=255)),
                ('date_of_submit', models.DateField()),
                ('student_comments', models.TextField()),
                ('supervisor_comments', models.TextField()),
                ('student_signature', models.CharField(max_length=255)),
                ('student_signature_date', models.DateField()),
                ('supervisor_signature', models.CharField(blank=True, max_length=255, null=True)),
                ('supervisor_signature_date', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'End of Term Report',
                'verbose_name_plural': 'End of Term Reports',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='WeeklyReport',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('student_name', models.CharField(max_length=255)),
                ('student_id', models.PositiveIntegerField()),
                ('organisation', models.CharField(max_length=255)),
                ('industry_supervisor', models.CharField(max_length=255)),
                ('date_prepared', models.DateField()),
                ('week_number', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(12)])),
                ('plans_for_next_week', models.TextField()),
                ('total_hours', models.FloatField()),
                ('is_signed', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Weekly Report',
                'verbose_name_plural': 'Weekly Reports',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='ScoreItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('position', models.PositiveSmallIntegerField(default=0)),
                ('question', models.CharField(max_length=255)),
                ('score', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('report', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='score_items', to='core.endoftermreport')),
            ],
            options={
                'ordering': ['position', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('position', models.PositiveSmallIntegerField(default=0)),
                ('day', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(7)])),
                ('date', models.DateField()),
                ('description', models.TextField()),
                ('hours_spent', models.FloatField(validators=[django.core.validators.MinValueValidator(0.5), django.core.validators.MaxValueValidator(24)])),
                ('report', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tasks', to='core.weeklyreport')),
            ],
            options={
                'ordering': ['position', 'id'],
            },
        ),
    ]
