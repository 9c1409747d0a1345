from django.urls import path
from . import views

app_name = 'matches'

urlpatterns = [
    # GET  /api/matches/       - List own matches
    # POST /api/matches/       - Like a profile
    # GET  /api/matches/{id}/  - Match detail
    path('', views.match_list, name='match-list'),
    path('<uuid:match_id>/', views.match_detail, name='match-detail'),
]
