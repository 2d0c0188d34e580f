from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'products'

router = DefaultRouter()
router.register(r'', views.ProductViewSet, basename='product')

urlpatterns = [
    # GET    /api/products/              - List menu
    # POST   /api/products/              - Add item
    # GET    /api/products/{id}/         - Get item
    # PATCH  /api/products/{id}/         - Edit item
    # GET    /api/products/categories/   - Distinct categories
    path('', include(router.urls)),
]
