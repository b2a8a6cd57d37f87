from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _

from item_chat.chat.history import HistoryStore


class ChatConfig(AppConfig):
    name = "item_chat.chat"
    label = "chat"
    verbose_name = _("Chat")

    def ready(self):
        # One store for the lifetime of the process; rooms are never evicted.
        self.history = HistoryStore()
