from django.urls import path
from . import views

app_name = 'profiles'

urlpatterns = [
    # GET  /api/profiles/me/        - Own profile
    # PUT  /api/profiles/me/        - Create or replace own profile
    # GET  /api/profiles/discover/  - Discovery batch
    # GET  /api/profiles/{id}/      - Profile card
    path('me/', views.my_profile, name='my-profile'),
    path('discover/', views.discover, name='discover'),
    path('<uuid:profile_id>/', views.profile_detail, name='profile-detail'),
]
