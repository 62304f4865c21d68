from .contract import Contract
from .league import League, LeagueCommissioner
from .notification import Notification
from .player import Player
from .team import Team
from .user import User

__all__ = [
	"Contract",
	"League",
	"LeagueCommissioner",
	"Notification",
	"Player",
	"Team",
	"User",
]
