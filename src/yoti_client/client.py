"""Yoti Connect client."""
from __future__ import annotations

from . import constants
from .crypto import decrypt_token, get_auth_key, load_private_key
from .dynamic_sharing.scenario import DynamicScenario, ShareUrlResult
from .profile.activity_details import ActivityDetails
from .request import Payload, RequestBuilder
from .transport import execute


class Client:
    """Yoti Connect client: share URLs and profile retrieval.

    Example::

        client = Client(sdk_id, pem)
        share = client.create_share_url(scenario)
        details = client.get_activity_details(token)
        print(details.profile.given_names)

    Args:
        sdk_id: Client SDK ID from the Yoti Hub.
        pem: PEM-encoded RSA private key.
        api_url: Connect API base URL (default: ``YOTI_CONNECT_API`` or production).
        timeout: Optional per-request timeout, passed to ``requests``.
    """

    def __init__(
        self,
        sdk_id: str,
        pem: str | bytes,
        *,
        api_url: str | None = None,
        timeout: float | None = None,
    ):
        self._private_key = load_private_key(pem)
        self._sdk_id = sdk_id
        self._pem = pem
        self._api_url = api_url or constants.connect_api_url()
        self._timeout = timeout

    def _builder(self, endpoint: str) -> RequestBuilder:
        return (
            RequestBuilder()
            .with_base_url(self._api_url)
            .with_pem_string(self._pem)
            .with_endpoint(endpoint)
            .with_query_param("appId", self._sdk_id)
        )

    def create_share_url(self, scenario: DynamicScenario) -> ShareUrlResult:
        """Create a share URL for a dynamic scenario."""
        request = (
            self._builder(f"/qrcodes/apps/{self._sdk_id}")
            .with_post()
            .with_payload(Payload(scenario))
            .build()
        )
        response = execute(request, timeout=self._timeout)
        return ShareUrlResult.from_json(response.get_parsed_response())

    def get_activity_details(self, encrypted_token: str) -> ActivityDetails:
        """Exchange a one-time-use token for the shared profile.

        Raises:
            CredentialError: If the token cannot be decrypted with this key.
            RequestError: On a non-2xx API response.
            ActivityDetailsError: If the share did not succeed.
        """
        token = decrypt_token(encrypted_token, self._private_key)
        request = (
            self._builder(f"/profile/{token}")
            .with_get()
            .with_header(constants.AUTH_KEY_HEADER, get_auth_key(self._private_key))
            .build()
        )
        response = execute(request, timeout=self._timeout)
        return ActivityDetails.from_receipt(response.get_receipt(), self._private_key)
