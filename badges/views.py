from rest_framework import generics
from rest_framework.permissions import IsAuthenticated
from .models import Badge, UserBadge, UserUnitTotal
from .serializers import BadgeSerializer, UserBadgeSerializer, UnitTotalSerializer


class BadgeListView(generics.ListAPIView):
    serializer_class = BadgeSerializer
    permission_classes = [IsAuthenticated]
    queryset = Badge.objects.filter(is_active=True).select_related('unit').order_by('unit__short_name', 'threshold', 'id')


class MyBadgesView(generics.ListAPIView):
    serializer_class = UserBadgeSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return UserBadge.objects.filter(
            user=self.request.user
        ).select_related('badge', 'badge__unit').order_by('-created_at', '-id')


class MyUnitTotalsView(generics.ListAPIView):
    serializer_class = UnitTotalSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        return UserUnitTotal.objects.filter(user=self.request.user).select_related('unit').order_by('unit__short_name')
