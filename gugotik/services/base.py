"""Shared plumbing for the resource request builders."""

from gugotik.client import Client
from gugotik.exceptions import InvalidCallError


class Service:
    """Base class holding the client every request builder talks through."""

    def __init__(self, client: Client):
        self.client = client


def require(**params) -> None:
    """
    Reject any parameter that was not supplied.

    Raises:
        InvalidCallError: Naming the first missing parameter
    """
    for name, value in params.items():
        if value is None:
            raise InvalidCallError(f'Missing required parameter: "{name}"')
