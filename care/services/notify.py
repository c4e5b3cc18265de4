"""Push events to a user's WebSocket group."""
import logging
from typing import Any, Dict

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

logger = logging.getLogger(__name__)


def user_group(user_id: int) -> str:
    return f"user.{user_id}"


def broadcast_to_user(user_id: int, event: Dict[str, Any]) -> bool:
    """Send ``event`` to ``user.<id>``; returns False when it could not be delivered."""
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return False
    try:
        async_to_sync(channel_layer.group_send)(user_group(user_id), event)
    except (OSError, RuntimeError) as e:
        logger.warning("broadcast to user %s failed: %s", user_id, e)
        return False
    return True
