from django.urls import path
from . import views

urlpatterns = [
    path('global/', views.GlobalRanksView.as_view()),
    path('monthly/', views.MonthlyRanksView.as_view()),
]
