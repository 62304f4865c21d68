from collections.abc import Iterable
from typing import TYPE_CHECKING

from django.db import models, transaction

from core.enums.notification_levels import NotificationLevels
from core.services.sms import get_text_messenger
from dynasty.settings import ENV

if TYPE_CHECKING:
	from core.models.user import User


class Notification(models.Model):
	"""In-app message for a league manager, mirrored by text message when enabled."""

	user = models.ForeignKey("core.User", on_delete=models.CASCADE, related_name="notifications")
	message = models.CharField(max_length=255)
	is_read = models.BooleanField(default=False)
	priority = models.PositiveIntegerField(
		default=1,
		help_text="Priority of the notification, higher number means higher priority",
	)
	level = models.CharField(
		max_length=10,
		choices=NotificationLevels.choices(),
		default=NotificationLevels.INFO,
		help_text="Notification level",
	)
	redirect_to = models.CharField(max_length=255, blank=True)
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:  # noqa: D106
		ordering = ("-created_at",)

	def __str__(self) -> str:
		return f"Notification for {self.user.username}: {self.message}"

	def save(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003, D102
		is_new = not self.pk

		super().save(*args, **kwargs)

		if is_new:
			transaction.on_commit(lambda: self.text_owners([self]))

	@classmethod
	def send_to_users(
		cls,
		users: Iterable["User"],
		message: str,
		*,
		level: str = NotificationLevels.INFO,
		redirect_to: str = "",
		priority: int = 1,
	) -> list["Notification"]:
		"""
		Notify several managers at once.

		The rows are written in a single insert. Text messages, if enabled, go out in a
		single provider call once the surrounding transaction commits.

		Args:
			users (Iterable[User]): Recipients; each gets one notification.
			message (str): The notification text.
			level (str): One of ``NotificationLevels``.
			redirect_to (str): Frontend path the notification links to.
			priority (int): Higher numbers are shown first.

		Returns:
			list[Notification]: The created notifications.
		"""
		notifications = cls.objects.bulk_create(
			[
				cls(user=user, message=message, level=level, redirect_to=redirect_to, priority=priority)
				for user in users
			],
		)
		transaction.on_commit(lambda: cls.text_owners(notifications))

		return notifications

	@property
	def text_body(self) -> str:
		"""Body of the text message mirroring this notification."""
		if self.level in (NotificationLevels.WARNING, NotificationLevels.ERROR):
			return f"[{self.level.upper()}] {self.message}"

		return self.message

	@staticmethod
	def text_owners(notifications: Iterable["Notification"]) -> bool:
		"""
		Mirror notifications by text message to recipients with a phone number.

		Returns:
			bool: Whether anything was sent.
		"""
		if not ENV.SEND_SMS_MESSAGES:
			return False

		outgoing = [(n.user.phone, n.text_body) for n in notifications if n.user.phone]

		if not outgoing:
			return False

		return get_text_messenger().send_many(outgoing)
