"""Django signals for cache invalidation."""

import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache import bump_catalog_version
from events.models import Event

logger = logging.getLogger(__name__)


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    bump_catalog_version()
    logger.debug("Catalog cache invalidated", extra={"event_id": str(instance.pk)})
