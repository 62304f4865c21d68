from .trade import Trade
from .trade_asset import TradeAsset
from .trade_history_record import TradeHistoryRecord
from .trade_participant import TradeParticipant
from .trade_vote import TradeVote

__all__ = ["Trade", "TradeAsset", "TradeHistoryRecord", "TradeParticipant", "TradeVote"]
