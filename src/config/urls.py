from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from django.urls import include, path, re_path

from modules.core.views import route_not_found

urlpatterns = [
    path("", include("modules.core.urls")),
    # Domain modules
    path("", include("modules.phones.urls")),
    path("", include("modules.cart.urls")),
    path("", include("modules.stock.urls")),
    # OpenAPI schema & docs (public)
    path("api/schema", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # Everything else is an unknown route
    re_path(r"^.*$", route_not_found),
]
