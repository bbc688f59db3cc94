from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Webinar",
            fields=[
                (
                    "id",
                    models.CharField(
                        editable=False, max_length=64, primary_key=True, serialize=False
                    ),
                ),
                ("organizer_id", models.CharField(db_index=True, max_length=64)),
                ("title", models.CharField(max_length=255)),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField()),
                ("seats", models.PositiveIntegerField()),
                ("version", models.PositiveIntegerField(default=0)),
            ],
            options={
                "ordering": ["start_date"],
                "indexes": [
                    models.Index(fields=["start_date"], name="webinar_start_date_idx")
                ],
            },
        ),
    ]
