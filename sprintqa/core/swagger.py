"""
OpenAPI schema and documentation views plus shared schema helpers.

The helpers keep `extend_schema` declarations on views short and give every
endpoint the same error body shape: {"error": str, "details": str}.
"""

from drf_spectacular.utils import inline_serializer
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from rest_framework import serializers

schema_view = SpectacularAPIView.as_view()
swagger_view = SpectacularSwaggerView.as_view(url_name='schema')
redoc_view = SpectacularRedocView.as_view(url_name='schema')


def error_response():
    """
    Schema for the error body returned with HTTP 500
    """
    return inline_serializer(
        name='ErrorResponse',
        fields={
            'error': serializers.CharField(),
            'details': serializers.CharField(required=False),
        }
    )
