# app/domain/errors.py


class ProductsApiError(Exception):
    """Bazowy blad domenowy, mapowany na odpowiedz {"error": message}."""

    status_code = 500

    def __init__(self, message: str, detail: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ProductsApiError):
    status_code = 400


class NotFoundError(ProductsApiError):
    status_code = 404


class ConflictError(ProductsApiError):
    # 409 duplikat id, 412 niezgodny etag
    status_code = 409


class UpstreamError(ProductsApiError):
    """Users service unreachable or answered with an unexpected status."""

    status_code = 502


class StorageError(ProductsApiError):
    status_code = 500
