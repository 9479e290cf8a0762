"""Message body model for Mattermost incoming webhooks.

Field reference: https://developers.mattermost.com/integrate/webhooks/incoming/#parameters
"""

from typing import Any

from pydantic import BaseModel, Field
from pydantic_core import PydanticSerializationError

from mmhook.exceptions import SerializationError


class MessageBody(BaseModel):
    """JSON payload accepted by a Mattermost incoming webhook.

    Every field is optional and unset (None) by default. Fields are plain
    mutable attributes with no validation on assignment, so empty strings
    or oversized text go to the server untouched. Assigning None makes a
    field unset again.

    Only fields that are set end up in the serialized JSON; unset fields
    are omitted rather than sent as null.

    Attributes:
        username: Display name override for the posting bot
        channel: Destination channel name or ID (overrides webhook default)
        text: Message content, Markdown supported
        icon_url: Avatar URL override
        icon_emoji: Emoji used as avatar override
        attachments: Message attachments (list or pre-encoded string), passed through as-is
        type: Post type (must begin with "custom_" on the server side)
        props: Extra post properties (mapping or string), passed through as-is

    Example:
        >>> body = MessageBody()
        >>> body.username = "mmhook"
        >>> body.text = "Hello, world!"
        >>> body.to_json()
        '{"username":"mmhook","text":"Hello, world!"}'
    """

    username: str | None = Field(default=None, description="Bot display name override")
    channel: str | None = Field(default=None, description="Destination channel name or ID")
    text: str | None = Field(default=None, description="Message text (Markdown)")
    icon_url: str | None = Field(default=None, description="Avatar URL override")
    icon_emoji: str | None = Field(default=None, description="Avatar emoji override")
    attachments: Any = Field(default=None, description="Message attachments (passed through)")
    type: str | None = Field(default=None, description="Custom post type")
    props: Any = Field(default=None, description="Post properties (passed through)")

    def to_dict(self) -> dict[str, Any]:
        """Return the set fields as a plain dictionary."""
        try:
            return self.model_dump(mode="json", exclude_none=True)
        except PydanticSerializationError as e:
            raise SerializationError(f"Error converting message body: {e}") from e

    def to_json(self) -> str:
        """Serialize the set fields to compact JSON text.

        Returns:
            JSON object string, "{}" when nothing is set

        Raises:
            SerializationError: If a value cannot be represented as JSON
        """
        try:
            return self.model_dump_json(exclude_none=True)
        except PydanticSerializationError as e:
            raise SerializationError(f"Error writing to JSON string: {e}") from e
