import os
import logging
import wsgiref.simple_server
from typing import Optional
from urllib.parse import parse_qs

from google_auth_oauthlib.flow import InstalledAppFlow
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from climbsync.config import BookingSyncConfig

logger = logging.getLogger(__name__)

class AuthorizationError(Exception):
    """Raised when no usable Google credential can be obtained."""

class GoogleAuthorizer:
    """
    Owns the OAuth credential cache (the token file).
    Everything downstream receives the returned Credentials explicitly.
    """
    def __init__(self, config: BookingSyncConfig):
        self.config = config
        self.scopes = list(config.scopes)

    def authorize(self) -> Credentials:
        creds = self._load_cached()

        if creds and creds.valid:
            return creds

        if creds and creds.expired and creds.refresh_token:
            return self.refresh(creds)

        if not os.path.exists(self.config.credentials_path):
            raise AuthorizationError(
                f"'{self.config.credentials_path}' not found. Download the OAuth 2.0 Client ID JSON "
                "from Google Cloud Console and save it at that path.")

        try:
            flow = InstalledAppFlow.from_client_secrets_file(self.config.credentials_path, self.scopes)
            creds = self._authenticate_headless(flow, port=self.config.oauth_redirect_port)
        except (GoogleAuthError, OAuth2Error, ValueError, OSError) as e:
            raise AuthorizationError(f"Authorization code exchange failed: {e}") from e

        self._store(creds)
        return creds

    def refresh(self, creds: Credentials) -> Credentials:
        try:
            creds.refresh(Request())
        except GoogleAuthError as e:
            raise AuthorizationError(f"Token refresh failed: {e}") from e
        self._store(creds)
        return creds

    def _load_cached(self) -> Optional[Credentials]:
        if not os.path.exists(self.config.token_path):
            return None
        try:
            return Credentials.from_authorized_user_file(self.config.token_path, self.scopes)
        except (ValueError, OSError) as e:
            logger.warning(f"Ignoring unreadable token at {self.config.token_path}: {e}")
            return None

    def _store(self, creds: Credentials) -> None:
        with open(self.config.token_path, 'w') as token:
            token.write(creds.to_json())
        logger.info(f"Token stored to {self.config.token_path}")

    def _authenticate_headless(self, flow: InstalledAppFlow, port: int = 8080) -> Credentials:
        """
        Authorization-code flow for headless/Docker environments.
        Listens on 0.0.0.0 but tells Google to redirect to localhost.
        """
        flow.redirect_uri = f'http://localhost:{port}/'
        auth_url, _ = flow.authorization_url(access_type='offline', prompt='consent')

        print("\n⚠️  AUTHORIZATION REQUIRED ⚠️")
        print(f"1. Open this URL in your browser:\n{auth_url}")
        print("2. Log in and allow access.")
        print(f"3. The browser will redirect to localhost:{port}, which this process will catch.")

        auth_code = None

        def app(environ, start_response):
            nonlocal auth_code
            params = parse_qs(environ.get('QUERY_STRING', ''))
            code = params.get('code', [None])[0]
            if code:
                auth_code = code
                start_response('200 OK', [('Content-Type', 'text/html')])
                return [b'<h1>Authorization Successful!</h1><p>You can close this window and return to the terminal.</p>']

            start_response('404 Not Found', [('Content-Type', 'text/plain')])
            return [b'Not Found']

        server = wsgiref.simple_server.make_server('0.0.0.0', port, app)
        # Browser pre-connects and keep-alives would otherwise block handle_request
        server.socket.settimeout(1.0)
        server.handle_error = lambda request, client_address: None

        try:
            while auth_code is None:
                server.handle_request()
        finally:
            server.server_close()

        flow.fetch_token(code=auth_code)
        return flow.credentials
