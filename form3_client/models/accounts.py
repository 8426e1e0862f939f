"""Account models for the Form3 API.

Ref: https://www.api-docs.form3.tech/api/schemes/fps-direct/accounts/accounts
"""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from form3_client.models.envelopes import RequestEnvelope, ResponseEnvelope

ACCOUNT_TYPE = "accounts"


class CreateAccountAttributes(BaseModel):
    """Attributes accepted when creating an account."""

    bank_id: str = Field(..., description="Local country bank identifier")
    bank_id_code: str = Field(..., description="Identifies the type of bank ID being used")
    bic: str = Field(..., description="SWIFT BIC in either 8 or 11 character format")
    country: str = Field(..., description="ISO 3166-1 code used to identify the domicile of the account")
    name: Optional[List[str]] = Field(None, description="Name of the account holder, up to four lines")
    account_classification: Optional[str] = Field(None, description="Personal or Business")
    account_number: Optional[str] = Field(None, description="Account number, generated if not provided")
    alternative_names: Optional[List[str]] = Field(None, description="Alternative primary account names")
    base_currency: Optional[str] = Field(None, description="ISO 4217 code used to identify the base currency")
    iban: Optional[str] = Field(None, description="IBAN of the account, generated if not provided")
    joint_account: Optional[bool] = Field(None, description="Whether the account is a joint account")
    secondary_identification: Optional[str] = Field(None, description="Additional information to identify the account")


class CreateAccountData(BaseModel):
    """Data section of a create account request."""

    id: str = Field(..., description="Unique resource ID (UUID)")
    organisation_id: str = Field(..., description="Organisation owning the resource (UUID)")
    type: str = Field(ACCOUNT_TYPE, description="Name of the resource type")
    attributes: Optional[CreateAccountAttributes] = Field(None, description="Account attributes")


class AccountAttributes(BaseModel):
    """Attributes of an account as returned by the API.

    Unknown attributes sent by the server are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    account_classification: Optional[str] = None
    account_matching_opt_out: Optional[bool] = None
    account_number: Optional[str] = None
    alternative_names: Optional[List[str]] = None
    bank_id: Optional[str] = None
    bank_id_code: Optional[str] = None
    base_currency: Optional[str] = None
    bic: Optional[str] = None
    country: Optional[str] = None
    iban: Optional[str] = None
    joint_account: Optional[bool] = None
    name: Optional[List[str]] = None
    secondary_identification: Optional[str] = None
    status: Optional[str] = None
    switched: Optional[bool] = None


class Account(BaseModel):
    """Account resource."""

    id: Optional[str] = Field(None, description="Unique resource ID (UUID)")
    organisation_id: Optional[str] = Field(None, description="Organisation owning the resource (UUID)")
    type: Optional[str] = Field(None, description="Name of the resource type")
    attributes: Optional[AccountAttributes] = Field(None, description="Account attributes")
    created_on: Optional[str] = Field(None, description="Creation timestamp (ISO-8601)")
    modified_on: Optional[str] = Field(None, description="Last modification timestamp (ISO-8601)")
    version: Optional[int] = Field(None, ge=0, description="Version number, incremented on each change")


CreateAccountRequest = RequestEnvelope[CreateAccountData]
AccountResponse = ResponseEnvelope[Account]
AccountListResponse = ResponseEnvelope[List[Account]]
