"""Platform name, API version and Graph API endpoints."""

PLATFORM = "instagram"
API_VERSION = "v11.0"

API_ENDPOINT_BASE = "https://graph.facebook.com"
API_ENDPOINT_SEND_MESSAGE = f"/{API_VERSION}/me/messages"
API_ENDPOINT_MESSENGER_PROFILE = f"/{API_VERSION}/me/messenger_profile"


def user_profile_endpoint(instagram_user_id: str) -> str:
    """Return the user profile endpoint path for an Instagram user id."""
    return f"/{API_VERSION}/{instagram_user_id}"