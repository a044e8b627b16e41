"""Turns failed operation results into HTTP errors."""

from typing import Annotated, TypeVar

from fastapi import Depends

from storage_gateway.dependencies import get_gateway
from storage_gateway.domain import ErrorKind, OperationResult
from storage_gateway.domain.operations import StorageGateway
from storage_gateway.exceptions import OperationFailedError

T = TypeVar("T")

GatewayDep = Annotated[StorageGateway, Depends(get_gateway)]


def unwrap(
    result: OperationResult[T],
    gateway: StorageGateway,
    message: str,
    not_found_status: int = 400,
) -> T:
    """
    Returns the result value, or raises OperationFailedError carrying the
    errors collected so far in the request.

    Storage failures map to 400. Routes that fetch a resource pass
    ``not_found_status=404`` to report a missing bucket or object as such.
    """
    if not result.ok:
        status_code = 400
        if result.error.kind is ErrorKind.NOT_FOUND:
            status_code = not_found_status
        raise OperationFailedError(
            message,
            result.error,
            errors=gateway.errors.get_all_errors(),
            status_code=status_code,
        )
    return result.value
