# ============================================
# issues/serializers/summary.py
# ============================================
from rest_framework import serializers


class SummaryOutputSerializer(serializers.Serializer):
    summary = serializers.CharField()
