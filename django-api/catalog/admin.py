from django.contrib import admin

from catalog.models import Event, TicketType


class TicketTypeInline(admin.TabularInline):
    model = TicketType
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "category", "date", "location", "total_tickets"]
    list_filter = ["category"]
    search_fields = ["title", "description", "location"]
    inlines = [TicketTypeInline]
