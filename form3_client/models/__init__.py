"""Data models for the Form3 API."""

from form3_client.models.envelopes import (
    RequestEnvelope,
    ResponseEnvelope,
    ResponseLinks,
    ErrorBody,
)
from form3_client.models.accounts import (
    ACCOUNT_TYPE,
    Account,
    AccountAttributes,
    AccountListResponse,
    AccountResponse,
    CreateAccountAttributes,
    CreateAccountData,
    CreateAccountRequest,
)

__all__ = [
    "RequestEnvelope",
    "ResponseEnvelope",
    "ResponseLinks",
    "ErrorBody",
    "ACCOUNT_TYPE",
    "Account",
    "AccountAttributes",
    "AccountListResponse",
    "AccountResponse",
    "CreateAccountAttributes",
    "CreateAccountData",
    "CreateAccountRequest",
]
