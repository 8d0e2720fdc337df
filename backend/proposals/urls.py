from django.urls import path
from . import views

app_name = 'proposals'

urlpatterns = [
    path('', views.ProposalListCreateView.as_view(), name='list_create'),
    path('/check', views.ProposalCheckView.as_view(), name='check'),
    path('/<int:pk>', views.ProposalDetailView.as_view(), name='detail'),
]
