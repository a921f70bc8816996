# app/domain/errors.py


class DomainError(Exception):
    """Bazowy blad domeny - kazdy niesie kod i status HTTP dla routerow."""

    code = "domain_error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidAmount(DomainError, ValueError):
    code = "invalid_amount"
    status_code = 400


class InsufficientBalance(DomainError):
    code = "insufficient_balance"
    status_code = 400


class WalletNotFound(DomainError, LookupError):
    code = "wallet_not_found"
    status_code = 404


class CheckoutInProgress(DomainError):
    code = "checkout_in_progress"
    status_code = 409


class UpstreamFailure(DomainError):
    code = "upstream_failure"
    status_code = 500


class NotFound(DomainError, LookupError):
    code = "not_found"
    status_code = 404


class CartItemNotFound(NotFound):
    pass


class OrderNotFound(NotFound):
    pass


class UserNotFound(NotFound):
    pass
