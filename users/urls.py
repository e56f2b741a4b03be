from django.urls import path
from . import views

urlpatterns = [
    path('register/', views.RegisterView.as_view()),
    path('login/', views.LoginView.as_view()),
    path('profile/', views.ProfileView.as_view()),
    path('verify-phone/', views.VerifyPhoneView.as_view()),
    path('users/', views.UserDirectoryView.as_view()),
]
