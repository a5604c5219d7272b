"""
Destination resolution - Fills credential placeholders in the webhook URL.
"""

from endpoint_monitor.core.entities import WebhookCredentials
from endpoint_monitor.core.exceptions import ConfigurationError

WEBHOOK_ID_PLACEHOLDER = "$DISCORD_WEBHOOK_ID"
WEBHOOK_TOKEN_PLACEHOLDER = "$DISCORD_WEBHOOK_TOKEN"


def resolve_webhook_url(template: str, credentials: WebhookCredentials) -> str:
    """
    Substitute credential placeholders in a webhook URL template.

    Only placeholders present in the template need a value, so a literal
    URL resolves to itself.

    Args:
        template: URL containing $DISCORD_WEBHOOK_ID / $DISCORD_WEBHOOK_TOKEN
        credentials: Values for the placeholders

    Returns:
        Resolved destination URL

    Raises:
        ConfigurationError: If a placeholder in the template has no value
    """
    url = template
    substitutions = (
        (WEBHOOK_ID_PLACEHOLDER, credentials.webhook_id),
        (WEBHOOK_TOKEN_PLACEHOLDER, credentials.webhook_token),
    )
    for placeholder, value in substitutions:
        if placeholder not in url:
            continue
        if not value:
            raise ConfigurationError(
                f"No value for {placeholder} in webhook_url; "
                f"set the {placeholder[1:]} environment variable"
            )
        url = url.replace(placeholder, value)

    return url
