from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    path('', views.dashboard, name='dashboard'),
    path('users/', views.user_list, name='user-list'),
    path('credits/', views.add_credits, name='add-credits'),
    path('home/', views.home, name='home'),
]
