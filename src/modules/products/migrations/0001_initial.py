import django.utils.timezone
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                (
                    "updated_at",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                ("name", models.TextField()),
                ("description", models.TextField()),
                ("manager", models.TextField()),
                ("password", models.TextField()),
                (
                    "status",
                    models.CharField(
                        choices=[("FOR_SALE", "For sale"), ("SOLD_OUT", "Sold out")],
                        default="FOR_SALE",
                        max_length=20,
                    ),
                ),
            ],
            options={
                "db_table": "products",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["name"], name="products_name_idx"),
                    models.Index(
                        fields=["created_at"], name="products_created_at_idx"
                    ),
                ],
            },
        ),
    ]
