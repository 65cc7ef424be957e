"""Errors raised by the account services and the store adapter."""


class AccountError(Exception):
    """Base class for account lifecycle exceptions."""


class RoleNotFoundError(AccountError):
    def __init__(self, role_id: str):
        super().__init__(f"Authority '{role_id}' not found")
        self.role_id = role_id


class ActivationNotFoundError(AccountError):
    """
    No pending account carries the key: it never existed or was already
    consumed. The two cases cannot be told apart from stored state.
    """


class AccountNotFoundError(AccountError):
    def __init__(self, login: str):
        super().__init__(f"Account '{login}' not found")
        self.login = login


class LoginAlreadyUsedError(AccountError):
    pass


class StoreUnavailableError(AccountError):
    """Persistence failure; the transaction was rolled back."""


class RegistrationError(AccountError, ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
