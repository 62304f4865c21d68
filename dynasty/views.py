from collections.abc import Sequence
from typing import Any

from django.db import DatabaseError, connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet


class HealthCheckViewSet(ViewSet):
	"""Liveness endpoint reporting whether the API and its database are reachable."""

	permission_classes = (AllowAny,)

	@staticmethod
	def list(*_: Sequence[Any], **__: dict[str, Any]) -> Response:
		"""
		Health check endpoint for the API.

		Returns:
			Response: 200 when the database answers, 503 otherwise.
		"""
		try:
			connection.ensure_connection()

		except DatabaseError:
			return Response({"api": "up", "database": "down"}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

		return Response({"api": "up", "database": "up"}, status=status.HTTP_200_OK)
