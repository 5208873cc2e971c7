from .routes import ROUTES, build_urlpatterns

urlpatterns = build_urlpatterns(ROUTES)
