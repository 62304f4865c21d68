from dynasty.common.enums import ChoicesEnum


class AssetKinds(ChoicesEnum):
	"""What a trade asset moves between teams."""

	CONTRACT = "contract"
	DRAFT_PICK = "draft_pick"
	CAP_SPACE = "cap_space"
