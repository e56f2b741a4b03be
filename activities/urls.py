from django.urls import path
from . import views

urlpatterns = [
    path('', views.ActivityLogListCreateView.as_view()),
]
