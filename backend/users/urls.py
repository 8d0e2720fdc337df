#backend/users/urls.py
from django.urls import path
from . import views

app_name = 'auth'

urlpatterns = [
    path('register', views.RegisterView.as_view(), name='register'),
    path('login', views.LoginView.as_view(), name='login'),
    path('me', views.MeView.as_view(), name='me'),
]
