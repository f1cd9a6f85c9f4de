from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import ProductViewSet

# Create a router and register our viewsets
router = DefaultRouter()
router.register(r'products', ProductViewSet, basename='product')

# The API URLs are determined automatically by the router
urlpatterns = [
    path('', include(router.urls)),
]

"""
Available endpoints:

PRODUCTS:
- GET    /api/products/                - List products (paginated, ?page=N)
- GET    /api/products/create/         - Categories for the creation form
- POST   /api/products/                - Create a product
- GET    /api/products/{id}/           - Get product details
- GET    /api/products/{id}/edit/      - Product and categories for the edit form
- PUT    /api/products/{id}/           - Replace a product
- DELETE /api/products/{id}/           - Delete a product
- POST   /api/products/import/         - Upload a CSV importation file (multipart)
"""
