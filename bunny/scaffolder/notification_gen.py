"""Push Notification generation (Firebase Cloud Messaging + local notifications)."""

from __future__ import annotations

from bunny.config import Module
from bunny.scaffolder import registry
from bunny.scaffolder.base import ModuleGenerator


class PushNotificationGenerator(ModuleGenerator):
    """Generates the notification handler, services, model and inbox page."""

    component = registry.PUSH_NOTIFICATION
    module = Module.PUSH_NOTIFICATION
    directories = (
        "core/notifications",
        "core/notifications/services",
        "core/notifications/models",
        "features/notifications/presentation/pages",
    )
    dependencies = {
        "firebase_core": "^2.15.0",
        "firebase_messaging": "^14.6.5",
        "flutter_local_notifications": "^15.1.0+1",
    }
