from __future__ import annotations

from typing import Any

from django.apps import apps
from django.http import HttpResponse
from django.http import JsonResponse
from django.views.decorators.http import require_GET

STATUS_TEXT = "Socket.IO Server is running. Connect via WebSocket client."


def check_history() -> dict[str, Any]:
    history = apps.get_app_config("chat").history
    return {"ok": True, **history.stats()}


@require_GET
def index(request):
    return HttpResponse(STATUS_TEXT, content_type="text/plain; charset=utf-8")


@require_GET
def health(request):
    components = {"history": check_history()}

    all_ok = all(v.get("ok", False) for v in components.values())
    status = "ok" if all_ok else "down"
    http_status = 200 if all_ok else 503

    return JsonResponse(
        {"status": status, "components": components},
        status=http_status,
    )
