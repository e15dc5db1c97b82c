from django.contrib import admin

from accounts.models import Session


@admin.register(Session)
class SessionAdmin(admin.ModelAdmin):
    list_display = ["user", "created_at"]
    search_fields = ["user__username", "user__email"]
