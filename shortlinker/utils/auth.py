"""Identity extraction from API Gateway events

Bearer tokens are verified upstream by the API Gateway Cognito authorizer,
which forwards the verified JWT claims in `requestContext.authorizer.claims`.
The identity found there is trusted as-is.

Functions:
    authenticated_owner(event) -> str
        Return the verified identity of the caller.

Example:
    >>> event = {'requestContext': {'authorizer': {'claims': {'sub': 'u-1', 'email': 'a@b.com'}}}}
    >>> authenticated_owner(event)
    'a@b.com'
"""

from typing import Any

from shortlinker.exceptions import AuthError


def authenticated_owner(event: dict[str, Any]) -> str:
    """Return the verified identity carried by an API Gateway event

    The `email` claim is preferred; the Cognito `sub` claim is used when the
    token carries no email.

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: The caller's identity.

    Raises:
        AuthError:
            If the event carries no verified claims.
    """
    request_context = event.get('requestContext') or {}
    authorizer = request_context.get('authorizer') or {}
    claims = authorizer.get('claims') or {}

    owner = claims.get('email') or claims.get('sub')
    if not owner:
        raise AuthError("Unauthorized: missing 'email' and 'sub' in JWT claims")
    return owner
