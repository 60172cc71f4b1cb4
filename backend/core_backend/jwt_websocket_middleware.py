"""
JWT WebSocket Authentication Middleware for Django Channels.

Authenticates WebSocket connections with the same access token the HTTP API
reads from the ``x-jwt`` header. Browsers cannot set custom headers on a
WebSocket handshake, so a ``?token=`` query parameter is accepted as well.
"""
import logging
from urllib.parse import parse_qs

import jwt
from channels.db import database_sync_to_async
from channels.middleware import BaseMiddleware
from django.conf import settings
from django.contrib.auth.models import AnonymousUser

logger = logging.getLogger(__name__)


class JWTAuthMiddleware(BaseMiddleware):
    """
    Resolve the token on a WebSocket handshake to a user and put it on
    ``scope['user']`` (AnonymousUser when missing or invalid).
    """

    async def __call__(self, scope, receive, send):
        # Only process WebSocket connections
        if scope['type'] != 'websocket':
            return await super().__call__(scope, receive, send)

        scope['user'] = await self.get_user_from_jwt(scope)

        return await super().__call__(scope, receive, send)

    @staticmethod
    def extract_token(scope):
        headers = dict(scope.get('headers', []))
        token = headers.get(b'x-jwt', b'').decode('utf-8').strip()
        if token:
            if token.lower().startswith('bearer '):
                token = token[7:].strip()
            return token

        query_string = scope.get('query_string', b'').decode('utf-8')
        values = parse_qs(query_string).get('token')
        return values[0] if values else None

    async def get_user_from_jwt(self, scope):
        access_token = self.extract_token(scope)

        if not access_token:
            logger.debug("No JWT access token found on WebSocket handshake")
            return AnonymousUser()

        jwt_config = settings.SIMPLE_JWT
        user_id = None
        try:
            payload = jwt.decode(
                access_token,
                jwt_config.get('SIGNING_KEY', settings.SECRET_KEY),
                algorithms=[jwt_config.get('ALGORITHM', 'HS256')],
                options={
                    'verify_signature': True,
                    'verify_exp': True,
                }
            )

            user_id = payload.get(jwt_config.get('USER_ID_CLAIM', 'id'))
            if not user_id:
                logger.warning("JWT payload missing user id claim")
                return AnonymousUser()

            return await self.get_user(user_id)

        except jwt.ExpiredSignatureError:
            logger.warning("Expired JWT token in WebSocket connection")
            return AnonymousUser()
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid JWT token in WebSocket connection: {e}")
            return AnonymousUser()

    @database_sync_to_async
    def get_user(self, user_id):
        from users.models import User

        try:
            return User.objects.get(id=user_id, is_active=True)
        except User.DoesNotExist:
            logger.warning(f"User {user_id} from JWT not found")
            return AnonymousUser()
