"""Operations modules for the Form3 API."""

from form3_client.operations.account_operations import AccountOperations, ACCOUNTS_PATH

__all__ = ["AccountOperations", "ACCOUNTS_PATH"]
