import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('care', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='reminder',
            name='time',
            field=models.CharField(blank=True, max_length=8, validators=[django.core.validators.RegexValidator('^([01]\\d|2[0-3]):[0-5]\\d(:[0-5]\\d)?$', 'Time must use HH:MM or HH:MM:SS format')]),
        ),
    ]
