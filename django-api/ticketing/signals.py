"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from ticketing.models import TicketType
from ticketing.stores.cached_store import ticket_types_cache_key


@receiver([post_save, post_delete], sender=TicketType)
def invalidate_ticket_type_cache(sender, instance, **kwargs):
    """Invalidate the event's ticket type listing when a ticket type changes."""
    cache.delete(ticket_types_cache_key(instance.event_id))
