from django.urls import path
from . import views

app_name = 'credits'

urlpatterns = [
    # GET /api/credits/balance/  - Current balance
    # GET /api/credits/entries/  - Ledger history
    path('balance/', views.my_balance, name='balance'),
    path('entries/', views.my_entries, name='entries'),
]
