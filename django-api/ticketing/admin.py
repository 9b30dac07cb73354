from django.contrib import admin

from ticketing.models import Event, Order, Ticket, TicketType


class TicketTypeInline(admin.TabularInline):
    model = TicketType
    extra = 1


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 0


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "start_time", "location", "cancelled"]
    list_filter = ["cancelled"]
    search_fields = ["title", "location"]
    inlines = [TicketTypeInline]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "price", "capacity", "sale_start", "sale_end"]
    list_filter = ["event"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["id", "event", "status", "total_amount", "refund_amount", "created_at"]
    list_filter = ["status", "event"]
    inlines = [TicketInline]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["ticket_type", "order", "quantity", "unit_price", "status"]
    list_filter = ["status", "ticket_type__event"]
