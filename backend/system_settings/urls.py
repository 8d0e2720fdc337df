from django.urls import path
from . import views

app_name = 'system_settings'

urlpatterns = [
    path('', views.SystemSettingsView.as_view(), name='detail'),
]
