from django.urls import path
from . import views

app_name = 'logbooks'

urlpatterns = [
    path('', views.LogbookListCreateView.as_view(), name='list_create'),
    path('/<int:pk>', views.LogbookDetailView.as_view(), name='detail'),
]
