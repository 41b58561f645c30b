"""Login and registration."""

from gugotik.constants import LOGIN_PATH, REGISTER_PATH
from gugotik.logging_config import get_logger
from gugotik.services.base import Service, require

logger = get_logger(__name__)


class Auth(Service):

    def login(self, username: str, password: str) -> dict:
        """
        Login with username and password.

        Stores the returned user_id and token in the client's config.

        Returns:
            {status_code, status_msg, user_id, token}
        """
        require(username=username, password=password)
        logger.info(f"Attempting to login user: {username}")
        result = self.client.call(
            'POST', LOGIN_PATH, data={'username': username, 'password': password}
        )
        self.client.config.set_session(result.get('user_id'), result.get('token'))
        logger.info(f"Login successful for user: {username} [user_id={result.get('user_id')}]")
        return result

    def register(self, username: str, password: str) -> dict:
        """
        Register a new user account.

        Stores the returned user_id and token in the client's config.

        Returns:
            {status_code, status_msg, user_id, token}
        """
        require(username=username, password=password)
        logger.info(f"Attempting to register user: {username}")
        result = self.client.call(
            'POST', REGISTER_PATH, data={'username': username, 'password': password}
        )
        self.client.config.set_session(result.get('user_id'), result.get('token'))
        logger.info(f"Registration successful for user: {username} [user_id={result.get('user_id')}]")
        return result
