"""Account operations for the Form3 API."""

from typing import Dict, List, Optional, Tuple
from urllib.parse import quote, urlencode

from form3_client.config.logging import get_logger
from form3_client.client.http_client import HTTPClient
from form3_client.models.accounts import (
    ACCOUNT_TYPE,
    Account,
    AccountListResponse,
    AccountResponse,
    CreateAccountAttributes,
    CreateAccountData,
    CreateAccountRequest,
)
from form3_client.models.envelopes import ResponseLinks

logger = get_logger(__name__)

ACCOUNTS_PATH = "organisation/accounts"


class AccountOperations:
    """Handle account operations with the Form3 API."""

    def __init__(self, http_client: HTTPClient):
        """Initialize account operations.

        Args:
            http_client: HTTP client for API requests
        """
        self.http_client = http_client

        logger.debug("Account operations initialized")

    def _account_path(self, account_id: str) -> str:
        return f"{ACCOUNTS_PATH}/{quote(account_id, safe='')}"

    async def create(
        self,
        account_id: str,
        organisation_id: str,
        attributes: Optional[CreateAccountAttributes] = None,
    ) -> Tuple[Account, ResponseLinks]:
        """Create an account.

        Args:
            account_id: Unique resource ID (UUID)
            organisation_id: Organisation owning the account (UUID)
            attributes: Account attributes

        Returns:
            Tuple of (created account, response links)

        Raises:
            APIError: For API errors, e.g. ConflictError for a duplicate ID
            TransportError: For transport and encoding failures
        """
        data = {"id": account_id, "organisation_id": organisation_id, "type": ACCOUNT_TYPE}
        if attributes is not None:
            data["attributes"] = attributes

        try:
            request = CreateAccountRequest(data=CreateAccountData(**data))
            response = await self.http_client.post(
                ACCOUNTS_PATH,
                body=request,
                result_type=AccountResponse,
            )

            logger.info(f"Created account {account_id}")
            return response.data, response.links

        except Exception as e:
            logger.error(f"Failed to create account {account_id}: {e}")
            raise

    async def fetch(self, account_id: str) -> Tuple[Account, ResponseLinks]:
        """Fetch an account.

        Args:
            account_id: Unique resource ID (UUID)

        Returns:
            Tuple of (account, response links)

        Raises:
            NotFoundError: If the account does not exist
            APIError: For other API errors
            TransportError: For transport and decoding failures
        """
        try:
            response = await self.http_client.get(
                self._account_path(account_id),
                result_type=AccountResponse,
            )

            logger.debug(f"Fetched account {account_id}")
            return response.data, response.links

        except Exception as e:
            logger.error(f"Failed to fetch account {account_id}: {e}")
            raise

    async def delete(self, account_id: str, version: int) -> None:
        """Delete an account.

        Args:
            account_id: Unique resource ID (UUID)
            version: Version of the account last observed by the caller

        Raises:
            NotFoundError: If the account does not exist
            ConflictError: If ``version`` is not the current version
            APIError: For other API errors
            TransportError: For transport failures
        """
        uri = f"{self._account_path(account_id)}?{urlencode({'version': version})}"

        try:
            await self.http_client.delete(uri)

            logger.info(f"Deleted account {account_id} (version {version})")

        except Exception as e:
            logger.error(f"Failed to delete account {account_id}: {e}")
            raise

    async def list(
        self,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> Tuple[List[Account], ResponseLinks]:
        """List accounts.

        Args:
            page_number: Page to return, starting at 0
            page_size: Number of accounts per page

        Returns:
            Tuple of (accounts, response links)
        """
        params: Dict[str, int] = {}
        if page_number is not None:
            params["page[number]"] = page_number
        if page_size is not None:
            params["page[size]"] = page_size

        uri = f"{ACCOUNTS_PATH}?{urlencode(params)}" if params else ACCOUNTS_PATH

        try:
            response = await self.http_client.get(uri, result_type=AccountListResponse)

            logger.debug(f"Listed {len(response.data)} accounts")
            return response.data, response.links

        except Exception as e:
            logger.error(f"Failed to list accounts: {e}")
            raise
