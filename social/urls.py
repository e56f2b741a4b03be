from django.urls import path
from . import views

urlpatterns = [
    path('friends/', views.FriendsListView.as_view()),
    path('friends/pending/', views.PendingRequestsView.as_view()),
    path('friends/<int:user_id>/', views.FriendDetailView.as_view()),
    path('friends/<int:user_id>/<str:action>/', views.FriendActionView.as_view()),
    path('follow/<int:user_id>/', views.FollowView.as_view()),
    path('followers/', views.FollowersView.as_view()),
    path('following/', views.FollowingView.as_view()),
]
