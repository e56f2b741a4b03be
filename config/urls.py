from django.contrib import admin
from django.urls import path, include
from rest_framework_simplejwt.views import TokenRefreshView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('users.urls')),
    path('api/social/', include('social.urls')),
    path('api/posts/', include('posts.urls')),
    path('api/badges/', include('badges.urls')),
    path('api/activities/', include('activities.urls')),
    path('ranks/', include('leaderboard.urls')),
    path('api/token/refresh/', TokenRefreshView.as_view()),
]
