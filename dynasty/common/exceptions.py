from typing import Any, Optional

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler


class DomainValidationError(exceptions.APIException):
	"""A client error raised by a model or service, reported with its specific reason."""

	status_code = status.HTTP_400_BAD_REQUEST
	default_detail = "Invalid request."
	default_code = "invalid"


def _join_messages(exc: ValidationError) -> str:
	"""Flatten a Django ValidationError into a single human-readable message."""  # noqa: DOC201
	return "; ".join(exc.messages)


def domain_exception_handler(exc: Exception, context: dict[str, Any]) -> Optional[Response]:
	"""
	Translate Django-level errors raised by models and services into DRF errors.

	Models and services raise plain Django exceptions so they stay usable outside of
	the request cycle. DRF only knows about its own exception types, so validation
	and lookup errors are mapped here while keeping the specific reason in `detail`.

	Args:
		exc (Exception): The raised exception.
		context (dict[str, Any]): The DRF handler context.

	Returns:
		Optional[Response]: The error response, or None to let Django handle it.
	"""
	if isinstance(exc, ValidationError):
		exc = DomainValidationError(_join_messages(exc))

	elif isinstance(exc, PermissionDenied):
		exc = exceptions.PermissionDenied(str(exc) or None)

	elif isinstance(exc, ObjectDoesNotExist):
		exc = exceptions.NotFound(str(exc) or None)

	return exception_handler(exc, context)
