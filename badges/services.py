import logging
from django.db.models import F
from .models import Badge, UserBadge, UserUnitTotal

logger = logging.getLogger(__name__)


def add_to_unit_total(user, unit, amount):
    total, _ = UserUnitTotal.objects.get_or_create(user=user, unit=unit)
    UserUnitTotal.objects.filter(pk=total.pk).update(grand_total=F('grand_total') + amount)


def award_reached_badges(user):
    """Link every active badge whose threshold the user's totals have reached. Returns the new awards."""
    totals = dict(
        UserUnitTotal.objects.filter(user=user).values_list('unit_id', 'grand_total')
    )
    owned = set(UserBadge.objects.filter(user=user).values_list('badge_id', flat=True))
    awarded = []
    reachable = Badge.objects.filter(is_active=True, unit__isnull=False).exclude(id__in=owned)
    for badge in reachable.order_by('threshold', 'id'):
        if totals.get(badge.unit_id, 0) >= badge.threshold:
            awarded.append(UserBadge.objects.create(user=user, badge=badge))
            logger.info(f'Badge {badge.id} awarded to user {user.id}')
    return awarded
