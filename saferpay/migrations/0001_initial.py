from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='OrderTransaction',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('order_number', models.CharField(blank=True, db_index=True, max_length=128)),
                ('method', models.CharField(max_length=12)),
                ('saferpay_id', models.CharField(blank=True, db_index=True, max_length=128, null=True)),
                ('account_id', models.CharField(blank=True, max_length=64)),
                ('amount', models.CharField(blank=True, max_length=32, null=True)),
                ('currency', models.CharField(blank=True, max_length=12)),
                ('action', models.CharField(blank=True, max_length=32)),
                ('result', models.CharField(blank=True, max_length=32, null=True)),
                ('request_data', models.TextField(blank=True)),
                ('response_data', models.TextField(blank=True)),
                ('date_created', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ('-date_created', '-id'),
            },
        ),
    ]
