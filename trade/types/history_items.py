from typing import NotRequired, TypedDict


class ReceivedItem(TypedDict):
	"""One asset a team received, as stored on a trade history record."""

	kind: str
	name: str
	salary: NotRequired[float]
	position: NotRequired[str]
	years_left: NotRequired[int]
	season: NotRequired[int]
	round: NotRequired[str]
	pick_number: NotRequired[int | None]
	original_owner: NotRequired[str]
	cap_amount: NotRequired[float]
	cap_year: NotRequired[int]


class VoteTally(TypedDict):
	"""Counts returned after a league vote is cast."""

	votes_for: int
	votes_against: int
	veto_threshold: int
	eligible_voters: int
	status: str
