from django.urls import path
from . import views

app_name = 'loyalty'

urlpatterns = [
    # POST /api/loyalty/purchase/                      - Earn points on a purchase
    path('purchase/', views.purchase, name='purchase'),
    # POST /api/loyalty/redeem/                        - Redeem points
    path('redeem/', views.redeem, name='redeem'),
    # GET  /api/loyalty/members/{id}/transactions/     - Transaction history
    path('members/<uuid:member_id>/transactions/', views.member_transactions, name='member-transactions'),
    # GET  /api/loyalty/members/{id}/balance/          - Balance vs. ledger
    path('members/<uuid:member_id>/balance/', views.member_balance, name='member-balance'),
]
