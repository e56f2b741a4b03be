from django.urls import path
from . import views

urlpatterns = [
    path('', views.BadgeListView.as_view()),
    path('mine/', views.MyBadgesView.as_view()),
    path('totals/', views.MyUnitTotalsView.as_view()),
]
