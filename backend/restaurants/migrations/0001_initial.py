import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(help_text="Name of the restaurant category.", max_length=100, unique=True)),
                ("slug", models.SlugField(max_length=120, unique=True)),
                ("cover_image", models.URLField(blank=True, max_length=500, null=True)),
            ],
            options={
                "verbose_name_plural": "categories",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Restaurant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255, unique=True, validators=[django.core.validators.MinLengthValidator(5)])),
                ("address", models.CharField(max_length=255)),
                ("cover_image", models.URLField(blank=True, max_length=500, null=True)),
                ("is_promoted", models.BooleanField(default=False)),
                ("promoted_until", models.DateTimeField(blank=True, null=True)),
                ("category", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="restaurants", to="restaurants.category")),
                ("owner", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="restaurants", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "indexes": [models.Index(fields=["is_promoted", "promoted_until"], name="restaurant_promotion_idx")],
            },
        ),
        migrations.CreateModel(
            name="Dish",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("price", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(0)])),
                ("photo", models.URLField(blank=True, max_length=500, null=True)),
                ("description", models.CharField(max_length=140)),
                ("options", models.JSONField(blank=True, default=list)),
                ("restaurant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="menu", to="restaurants.restaurant")),
            ],
            options={
                "verbose_name_plural": "dishes",
            },
        ),
    ]
