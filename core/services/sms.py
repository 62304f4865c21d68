from collections.abc import Iterable
from functools import lru_cache
from warnings import warn

import clicksend_client
from clicksend_client import SmsMessage
from clicksend_client.rest import ApiException

from dynasty.settings import ENV


class TextMessenger:
	"""Sends league notifications to managers' phones through ClickSend."""

	sender_name = "Dynasty Cap"
	max_body_length = 160

	def __init__(self) -> None:
		"""Initialize ClickSend SMS API client."""
		configuration = clicksend_client.Configuration()
		configuration.username = ENV.CLICKSEND_USERNAME
		configuration.password = ENV.CLICKSEND_API_KEY

		self.api_instance = clicksend_client.SMSApi(clicksend_client.ApiClient(configuration))

	def build_message(self, phone_number: str, body: str) -> SmsMessage:
		"""One outgoing message, its body cut to a single SMS segment."""  # noqa: DOC201
		if len(body) > self.max_body_length:
			body = body[: self.max_body_length - 3] + "..."

		return SmsMessage(source=self.sender_name, body=body, to=phone_number)

	def send_many(self, messages: Iterable[tuple[str, str]]) -> bool:
		"""
		Send a batch of text messages in one provider call.

		Delivery failures are reported as a RuntimeWarning and never raised.

		Args:
			messages (Iterable[tuple[str, str]]): ``(phone_number, body)`` pairs.

		Returns:
			bool: True if the batch was accepted by the provider, False otherwise.
		"""
		collection = clicksend_client.SmsMessageCollection(
			messages=[self.build_message(phone_number, body) for phone_number, body in messages],
		)

		try:
			self.api_instance.sms_send_post(collection)

		except ApiException as e:
			warn(f"Exception when sending {len(collection.messages)} text messages: {e}", stacklevel=2, category=RuntimeWarning)
			return False

		return True


@lru_cache(maxsize=1)
def get_text_messenger() -> TextMessenger:
	"""Get the process-wide TextMessenger, built on first use."""  # noqa: DOC201
	return TextMessenger()
