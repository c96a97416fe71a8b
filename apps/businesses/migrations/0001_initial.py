# Generated manually for local deals businesses

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Business',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('address', models.CharField(max_length=300)),
                ('latitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('longitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('category', models.CharField(choices=[('Restaurant', 'Restaurant'), ('Cafe', 'Cafe'), ('Retail', 'Retail'), ('Salon & Spa', 'Salon & Spa'), ('Fitness', 'Fitness'), ('Entertainment', 'Entertainment'), ('Services', 'Services'), ('Other', 'Other')], db_index=True, default='Restaurant', max_length=30)),
                ('logo_url', models.URLField(blank=True, max_length=500)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='business', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'businesses',
                'verbose_name_plural': 'businesses',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['name'], name='businesses_name_idx'),
                ],
            },
        ),
    ]
