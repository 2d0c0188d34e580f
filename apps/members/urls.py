from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'members'

router = DefaultRouter()
router.register(r'', views.MemberViewSet, basename='member')

urlpatterns = [
    # GET    /api/members/        - List members
    # POST   /api/members/        - Enrol member
    # GET    /api/members/{id}/   - Get member
    # PATCH  /api/members/{id}/   - Update contact details
    path('', include(router.urls)),
]
