from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include

from qaboard.views import qa_ui
from .swagger import schema_view, swagger_view, redoc_view

# Define project URL routing configuration
urlpatterns = [
    # Browser UI entry document
    path('', qa_ui, name='qa-ui'),

    # Health check endpoint
    # Used by Docker/Kubernetes for container health monitoring
    path('health', lambda _: JsonResponse({'health': 'OK'}, status=200)),

    # API Schema endpoint
    # Provides the OpenAPI schema in JSON format
    path('api/schema', schema_view, name='schema'),

    # Swagger UI documentation route
    path('swagger', swagger_view, name='swagger-ui'),

    # ReDoc documentation route
    path('redoc', redoc_view, name='redoc'),

    # Django admin site route
    # Read-only inspection of stored checklist state
    path('admin/', admin.site.urls),

    # Sprint issues and QA checklist endpoints
    path('api/', include('qaboard.urls')),
]
