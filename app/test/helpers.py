"""
Request helpers shared by the API tests.
"""
from app.utils.constants import USER_ID_HEADER


def auth_headers(user_id) -> dict[str, str]:
    """Headers the auth proxy would forward for a signed-in user."""
    return {USER_ID_HEADER: str(user_id)}
