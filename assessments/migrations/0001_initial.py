import uuid

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('classrooms', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Assessment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=255)),
                ('assessment_date', models.DateField(blank=True, null=True)),
                ('max_score', models.DecimalField(blank=True, decimal_places=2, max_digits=7, null=True)),
                ('classroom', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assessments', to='classrooms.classroom', verbose_name='Class')),
            ],
            options={
                'ordering': ['-assessment_date', 'title'],
            },
        ),
        migrations.CreateModel(
            name='AssessmentEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('score', models.DecimalField(blank=True, decimal_places=2, max_digits=7, null=True)),
                ('assessment', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='assessments.assessment')),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assessment_entries', to='classrooms.student')),
            ],
            options={
                'verbose_name_plural': 'Assessment entries',
                'unique_together': {('assessment', 'student')},
            },
        ),
        migrations.CreateModel(
            name='RunningRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('record_date', models.DateField()),
                ('text_title', models.CharField(blank=True, max_length=255)),
                ('total_words', models.PositiveIntegerField()),
                ('errors', models.PositiveIntegerField(default=0)),
                ('self_corrections', models.PositiveIntegerField(default=0)),
                ('accuracy_pct', models.FloatField()),
                ('level', models.CharField(max_length=50)),
                ('sc_ratio', models.FloatField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='running_records', to='classrooms.student')),
            ],
            options={
                'ordering': ['-record_date', '-created_at'],
            },
        ),
    ]
