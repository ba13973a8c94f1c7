from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies: list = []

    operations = [
        migrations.CreateModel(
            name="Task",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("link_crawl", "Link Crawl"),
                            ("home_distribution", "Home Distribution"),
                            ("realtime_notify", "Realtime Notify"),
                            ("federated_deliver", "Federated Deliver"),
                            ("reply_notify_origin", "Reply Notify Origin"),
                        ],
                        max_length=500,
                    ),
                ),
                ("priority", models.IntegerField(default=0)),
                ("subject", models.TextField()),
                ("payload", models.JSONField(blank=True, null=True)),
                ("error", models.TextField(blank=True, null=True)),
                ("created", models.DateTimeField(auto_now_add=True)),
                ("completed", models.DateTimeField(blank=True, null=True)),
                ("failed", models.DateTimeField(blank=True, null=True)),
                ("locked", models.DateTimeField(blank=True, null=True)),
                ("locked_by", models.CharField(blank=True, max_length=500, null=True)),
            ],
            options={
                "indexes": [
                    models.Index(
                        fields=["type", "subject"], name="ix_task_type_subject"
                    )
                ],
            },
        ),
    ]
