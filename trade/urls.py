from django.conf.urls import include
from django.urls import path
from rest_framework import routers

from .views.trade import TradeViewSet
from .views.trade_action import TradeActionView
from .views.trade_history import TradeHistoryViewSet

router = routers.DefaultRouter()

router.register(r"", TradeViewSet, basename="trade")

history_router = routers.SimpleRouter()

history_router.register(r"", TradeHistoryViewSet, basename="trade-history")

urlpatterns = [
	path("trades/actions/", TradeActionView.as_view(), name="trade-actions"),
	path("trades/", include(router.urls)),
	path("trade-history/", include(history_router.urls)),
]
