"""Maps exceptions raised by views to JSON error responses.

- Domain errors become ``{message, error}`` with the status for their code.
- DRF errors keep their status and are reshaped to ``{message, errors?}``.
- Anything else is logged and returned as a generic 500.
"""

import logging

from django.utils.translation import gettext as _
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from common.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_NOT_ON_SALE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INSUFFICIENT_STOCK: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TRANSACTION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_ALREADY_USED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TICKET_NOT_PAYABLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ILLEGAL_TRANSITION: status.HTTP_409_CONFLICT,
}


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"message": str(error.message), "error": error.code.value},
        status=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def api_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return domain_error_response(exc)

    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, ValidationError):
            response.data = {"message": _("Invalid request data."), "errors": exc.detail}
        else:
            detail = response.data.get("detail", "") if isinstance(response.data, dict) else ""
            response.data = {"message": str(detail)}
        return response

    view = context.get("view")
    logger.exception("Unhandled error in %s", type(view).__name__ if view else "view")
    return Response(
        {"message": _("An internal error occurred.")},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
