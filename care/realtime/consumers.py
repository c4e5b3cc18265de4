import json

from channels.generic.websocket import AsyncWebsocketConsumer
from django.contrib.auth.models import AnonymousUser

from care.services.notify import user_group


class UpdatesConsumer(AsyncWebsocketConsumer):
    """Per-user live updates (reminder changes and due reminders)."""

    async def connect(self):
        user = self.scope.get("user") or AnonymousUser()
        if not user.is_authenticated:
            await self.close(code=4401)
            return
        self.group_name = user_group(user.id)
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()
        await self.send(json.dumps({"type": "welcome", "message": "connected"}))

    async def disconnect(self, close_code):
        if hasattr(self, "group_name"):
            await self.channel_layer.group_discard(self.group_name, self.channel_name)

    # event: {"type": "reminders.changed", "petId": ..., "action": ..., "reminderId": ...}
    async def reminders_changed(self, event):
        await self.send(json.dumps(event))

    # event: {"type": "reminder.due", "reminder": {...}}
    async def reminder_due(self, event):
        await self.send(json.dumps(event))
