from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView
)
from . import views

urlpatterns = [
    # Root redirects to the product list
    path('', views.home, name='home'),

    # Django Admin (default)
    path('admin/', admin.site.urls),

    # Web Interfaces
    path('', include('products.urls')),
    path('Identity/Account/', include('users.web_urls')),

    # API endpoints
    path('', include('products.api_urls')),
    path('api/auth/', include('users.urls')),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/schema/swagger-ui/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/schema/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]
