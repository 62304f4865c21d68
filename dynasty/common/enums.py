from enum import StrEnum


class ChoicesEnum(StrEnum):
	"""String enumeration that can feed a Django field's ``choices``."""

	@classmethod
	def choices(cls) -> list[tuple[str, str]]:
		"""
		Django field choices for the enumeration.

		Returns:
			list[tuple[str, str]]: ``(value, label)`` pairs, labels derived from member names.
		"""
		return [(member.value, member.name.replace("_", " ").title()) for member in cls]

	@classmethod
	def values(cls) -> list[str]:
		"""All raw values of the enumeration."""  # noqa: DOC201
		return [member.value for member in cls]
