from django.urls import path
from . import views

app_name = 'notifications'

urlpatterns = [
    path('', views.NotificationListCreateView.as_view(), name='list_create'),
    path('/unread-count', views.UnreadCountView.as_view(), name='unread_count'),
    path('/<int:pk>/read', views.NotificationReadView.as_view(), name='mark_read'),
]
