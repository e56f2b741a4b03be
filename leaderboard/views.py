from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from .ranking import RankingEngine
from .serializers import LeaderboardEntrySerializer


class GlobalRanksView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        entries = RankingEngine().compute_global_ranking()
        return Response(LeaderboardEntrySerializer(entries, many=True).data)


class MonthlyRanksView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        entries = RankingEngine().compute_current_month_ranking()
        return Response(LeaderboardEntrySerializer(entries, many=True).data)
