from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User, Verification
from .forms import UserAdminChangeForm, UserAdminCreationForm


@admin.action(description="Mark selected users as verified")
def mark_verified(modeladmin, request, queryset):
    updated = queryset.update(verified=True)
    Verification.objects.filter(user__in=queryset).delete()
    modeladmin.message_user(request, f"Verified {updated} user(s).")


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    form = UserAdminChangeForm
    add_form = UserAdminCreationForm
    actions = [mark_verified]

    list_display = ("email", "role", "verified", "is_staff", "is_active", "created_at")
    list_filter = ("role", "verified", "is_staff", "is_superuser", "is_active")
    search_fields = ("email",)
    ordering = ("email",)

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        (
            "Permissions & Role",
            {
                "fields": (
                    "role",
                    "verified",
                    "is_active",
                    "is_staff",
                    "is_superuser",
                    "groups",
                    "user_permissions",
                )
            },
        ),
        ("Important dates", {"fields": ("last_login",)}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "password", "password2", "role"),
            },
        ),
    )


@admin.register(Verification)
class VerificationAdmin(admin.ModelAdmin):
    list_display = ("user", "code", "created_at")
    search_fields = ("user__email", "code")
    readonly_fields = ("code",)
