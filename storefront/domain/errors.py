# storefront/domain/errors.py


class ServiceError(Exception):
    """Base for errors rendered as {"status": ..., "msg": ...}."""

    status_code = 500

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class ValidationError(ServiceError, ValueError):
    status_code = 400


class NotFound(ServiceError, LookupError):
    status_code = 404


class Conflict(ServiceError):
    status_code = 400


class Unauthorized(ServiceError, PermissionError):
    status_code = 401


USER_NOT_FOUND = "No user with this ID exists"
PRODUCT_NOT_FOUND = "Product not found"
ITEM_NOT_FOUND = "Item does not exist"
