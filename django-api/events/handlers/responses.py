"""Map Result envelopes onto HTTP responses."""

from rest_framework import status
from rest_framework.response import Response

from events.domain import ErrorCode, Failure, Result
from events.domain.errors import UNEXPECTED_MESSAGE

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.AUTH_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STORE_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.UNEXPECTED_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def failure_response(result: Failure) -> Response:
    # Unexpected faults are logged by the service; the client gets a generic message.
    message = UNEXPECTED_MESSAGE if result.code is ErrorCode.UNEXPECTED_ERROR else result.error
    return Response(
        {"success": False, "error": message, "code": result.code.value},
        status=STATUS_BY_CODE.get(result.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def result_response(result: Result, serialize=None, status_code: int = status.HTTP_200_OK) -> Response:
    if not result.success:
        return failure_response(result)
    data = serialize(result.data) if serialize is not None else result.data
    return Response({"success": True, "data": data}, status=status_code)
