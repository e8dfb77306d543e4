# views/utils.py
"""
Shared drf-spectacular helpers for the APIView classes in this app.
"""
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, inline_serializer
from rest_framework import serializers

# ---- Reusable error schema
ErrorSerializer = inline_serializer(
    name="Error",
    fields={"message": serializers.CharField()}
)

UpstreamErrorSerializer = inline_serializer(
    name="UpstreamError",
    fields={"message": serializers.CharField(), "error": serializers.CharField()}
)

# ---- Param helpers

def q_int(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.QUERY, required=required, description=description)

def q_str(name: str, description: str, required: bool = False, enum=None):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=required, description=description, enum=enum)

def q_bool(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.BOOL, OpenApiParameter.QUERY, required=required, description=description)

def q_datetime(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.DATETIME, OpenApiParameter.QUERY, required=required, description=description)

def path_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)

# ---- Convenience for common responses

def std_errors(*codes: int, extra: dict | None = None):
    """Error response mapping to merge into responses=...; defaults to 400/401/403/404."""
    descriptions = {
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        500: "Internal Server Error",
    }
    errs = {
        code: OpenApiResponse(ErrorSerializer, description=descriptions[code])
        for code in (codes or (400, 401, 403, 404))
    }
    if extra:
        errs.update(extra)
    return errs
