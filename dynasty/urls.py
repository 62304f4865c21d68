from django.contrib import admin
from django.urls import include, path
from rest_framework import routers
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from dynasty.views import HealthCheckViewSet

router = routers.DefaultRouter()
router.register(r"health", HealthCheckViewSet, basename="health")

urlpatterns = [
	path("admin/", admin.site.urls),
	path("api/", include(router.urls)),
	path("api/auth/token/", TokenObtainPairView.as_view(), name="token-obtain-pair"),
	path("api/auth/token/refresh/", TokenRefreshView.as_view(), name="token-refresh-pair"),
	path("api/", include("core.urls")),
	path("api/", include("draft.urls")),
	path("api/", include("cap.urls")),
	path("api/", include("trade.urls")),
]
