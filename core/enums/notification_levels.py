from dynasty.common.enums import ChoicesEnum


class NotificationLevels(ChoicesEnum):
	"""How a notification is presented to the manager."""

	INFO = "info"
	SUCCESS = "success"
	WARNING = "warning"
	ERROR = "error"
