from django.urls import path

from .api_views import ProductListApiView, ProductDetailApiView

app_name = 'api-products'

urlpatterns = [
    path('api/Products', ProductListApiView.as_view(), name='list'),
    path('api/Products/<int:id>', ProductDetailApiView.as_view(), name='detail'),
]

"""
Available endpoints:

- GET    /api/Products         - List all products
- POST   /api/Products         - Create a product (201 + Location)
- GET    /api/Products/{id}    - Get one product (404 if absent)
- PUT    /api/Products/{id}    - Replace a product (400 on id mismatch, 204 on success)
- DELETE /api/Products/{id}    - Delete a product (404 if absent, 204 on success)
"""
