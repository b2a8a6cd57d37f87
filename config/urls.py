from django.urls import path

from .health import health as health_view
from .health import index as index_view

urlpatterns = [
    # Liveness only; chat traffic goes over Socket.IO (see config.asgi).
    path("", index_view, name="home"),
    path("health/", health_view, name="health"),
]
