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
            name="AuditRecord",
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
                ("target_table", models.CharField(max_length=64)),
                ("target_id", models.BigIntegerField()),
                (
                    "action",
                    models.CharField(
                        choices=[
                            ("approve", "Approve"),
                            ("reject", "Reject"),
                            ("suspend", "Suspend"),
                            ("restore", "Restore"),
                            ("delete", "Delete"),
                            ("set_recommended", "Set recommended"),
                            ("clear_recommended", "Clear recommended"),
                            ("set_blacklisted", "Set blacklisted"),
                            ("clear_blacklisted", "Clear blacklisted"),
                            ("set_objection", "Set objection"),
                            ("clear_objection", "Clear objection"),
                        ],
                        max_length=32,
                    ),
                ),
                ("reason", models.TextField(blank=True, null=True)),
                ("snapshot", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "actor",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="audit_records",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(
                        fields=["target_table", "target_id"],
                        name="ix_audit_target",
                    )
                ],
            },
        ),
    ]
