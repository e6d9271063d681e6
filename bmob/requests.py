from typing import Optional

from requests.auth import AuthBase

from bmob.protocol.headers import build_headers


class BmobAuth(AuthBase):
    """
    Attach the ``X-Bmob-*`` headers to a request::

        requests.get(api_url(user_uri()), auth=BmobAuth(app_id, api_key))
    """

    def __init__(
        self,
        application_id: str,
        api_key: Optional[str] = None,
        master_key: Optional[str] = None,
        session_token: Optional[str] = None,
    ) -> None:
        self.application_id = application_id
        self.api_key = api_key
        self.master_key = master_key
        self.session_token = session_token

    def headers(self) -> dict:
        return build_headers(
            self.application_id,
            api_key=self.api_key,
            master_key=self.master_key,
            session_token=self.session_token,
        )

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BmobAuth) and self.headers() == other.headers()

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __call__(self, r):
        r.headers.update(self.headers())
        return r
