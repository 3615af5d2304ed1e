from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('works', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='WorkActivity',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('action_type', models.CharField(choices=[('overdue_reason_set', 'Overdue Reason Set'), ('overdue_reason_cleared', 'Overdue Reason Cleared')], db_index=True, max_length=30)),
                ('description', models.TextField(help_text='Human-readable description of the change')),
                ('old_value', models.TextField(blank=True, null=True)),
                ('new_value', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('user', models.ForeignKey(blank=True, help_text='User who performed the action', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='work_activities', to=settings.AUTH_USER_MODEL)),
                ('work', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='activities', to='works.work')),
            ],
            options={
                'verbose_name': 'work activity',
                'verbose_name_plural': 'work activities',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['work', '-created_at'], name='activity_work_created_idx')],
            },
        ),
    ]
