import logging
from django.db import transaction
from badges.models import BadgeUnit
from badges.services import add_to_unit_total, award_reached_badges
from .models import ActivityLog
from .payload import activity_distance, numeric_fields

logger = logging.getLogger(__name__)


@transaction.atomic
def record_activity(user, payload):
    """
    Append an activity log entry and roll its numeric fields into the
    user's unit totals (one per BadgeUnit whose short_name matches a field).
    """
    activity_distance(payload)
    log = ActivityLog.objects.create(user=user, activity=payload)

    values = numeric_fields(payload)
    for unit in BadgeUnit.objects.filter(short_name__in=list(values)):
        add_to_unit_total(user, unit, values[unit.short_name])

    awarded = award_reached_badges(user)
    logger.info(f'Activity {log.id} recorded for user {user.id} ({len(awarded)} new badges)')
    return log
