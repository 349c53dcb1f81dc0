"""Credential policy: how automation authenticates to the GitHub API.

Usage:
    credentials = from_personal_access_token(secret="MY_TOKEN")
    credentials = from_app()

    # Inside a job definition
    steps = [*credentials.setup_steps(), {"run": "gh pr list", "env": {"GH_TOKEN": credentials.token_ref}}]
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_SECRET = "PROJEN_GITHUB_TOKEN"
DEFAULT_APP_ID_SECRET = "PROJEN_APP_ID"
DEFAULT_APP_PRIVATE_KEY_SECRET = "PROJEN_APP_PRIVATE_KEY"


class ConflictingCredentialConfigurationError(ValueError):
    """Raised when the deprecated token secret and its replacement are both set."""


def _secret_ref(name: str) -> str:
    return "${{ secrets." + name + " }}"


@dataclass(frozen=True, slots=True)
class PersonalAccessToken:
    """Authenticate with a personal access token stored in a repository secret.

    The token needs the `repo`, `workflows` and `packages` scopes.
    """

    secret: str = DEFAULT_TOKEN_SECRET

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("Personal access token secret name must not be empty")

    @property
    def token_ref(self) -> str:
        """Expression a workflow step uses to read the token."""
        return _secret_ref(self.secret)

    def setup_steps(self) -> list[dict[str, Any]]:
        """Steps a job runs before the token is usable. None for a stored token."""
        return []


@dataclass(frozen=True, slots=True)
class GithubApp:
    """Authenticate as a GitHub App, minting a short-lived token per job.

    Attributes:
        app_id_secret: Secret holding the app ID.
        private_key_secret: Secret holding the app's private key.
    """

    app_id_secret: str = DEFAULT_APP_ID_SECRET
    private_key_secret: str = DEFAULT_APP_PRIVATE_KEY_SECRET

    @property
    def token_ref(self) -> str:
        """Expression a workflow step uses to read the generated token."""
        return "${{ steps.generate_token.outputs.token }}"

    def setup_steps(self) -> list[dict[str, Any]]:
        """Token generation step that must precede any step using token_ref."""
        return [
            {
                "name": "Generate token",
                "id": "generate_token",
                "uses": "tibdex/github-app-token@v1",
                "with": {
                    "app_id": _secret_ref(self.app_id_secret),
                    "private_key": _secret_ref(self.private_key_secret),
                },
            }
        ]


GithubCredentials = PersonalAccessToken | GithubApp


def from_personal_access_token(secret: str = DEFAULT_TOKEN_SECRET) -> PersonalAccessToken:
    """Credentials backed by a personal access token secret."""
    return PersonalAccessToken(secret=secret)


def from_app(
    app_id_secret: str = DEFAULT_APP_ID_SECRET,
    private_key_secret: str = DEFAULT_APP_PRIVATE_KEY_SECRET,
) -> GithubApp:
    """Credentials backed by a GitHub App installation."""
    return GithubApp(app_id_secret=app_id_secret, private_key_secret=private_key_secret)


def resolve_credentials(
    credentials: GithubCredentials | None,
    token_secret: str | None,
) -> GithubCredentials:
    """Pick the credential policy from new-style and legacy settings.

    An empty legacy secret name counts as not given.

    Resolution order:
    1. Both given: conflict, nothing is resolved.
    2. Only the legacy secret name: personal access token with that secret.
    3. Only credentials: returned unchanged.
    4. Neither: personal access token named PROJEN_GITHUB_TOKEN.

    Args:
        credentials: New-style credential policy.
        token_secret: Deprecated secret name for a personal access token.

    Returns:
        The resolved credential policy.

    Raises:
        ConflictingCredentialConfigurationError: If both inputs are given.
    """
    if credentials is not None and token_secret:
        raise ConflictingCredentialConfigurationError(
            "projen_token_secret is deprecated, please use projen_credentials instead"
        )

    if token_secret:
        warnings.warn(
            "projen_token_secret is deprecated, use "
            "projen_credentials=from_personal_access_token(secret=...) instead",
            DeprecationWarning,
            stacklevel=3,
        )
        resolved: GithubCredentials = PersonalAccessToken(secret=token_secret)
    elif credentials is not None:
        resolved = credentials
    else:
        resolved = PersonalAccessToken(secret=DEFAULT_TOKEN_SECRET)

    logger.debug("Resolved GitHub credentials: %s", type(resolved).__name__)
    return resolved
