"""URL configuration for CoworkHub.

Routes the Django admin, JWT token endpoints, API docs and the routers
provided by each domain app.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/v1/auth/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/v1/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('api/v1/users/', include('apps.users.urls')),
    path('api/v1/workspaces/', include('apps.workspaces.urls')),
    path('api/v1/bookings/', include('apps.bookings.urls')),
    path('api/v1/memberships/', include('apps.memberships.urls')),
    path('api/v1/cantina/', include('apps.cantina.urls')),
]
