from decimal import Decimal
from typing import Any


def get_number_suffix(number: float) -> str:
	"""
	Get the ordinal suffix for a given number.

	Args:
		number: The number to get the suffix for.

	Returns:
		str: The ordinal suffix ('st', 'nd', 'rd', 'th') for the number.

	Example:
		>>> get_number_suffix(2)
		'nd'
		>>> get_number_suffix(12)
		'th'
	"""
	if 10 <= number % 100 <= 20:
		return "th"

	return {1: "st", 2: "nd", 3: "rd"}.get(int(number) % 10, "th")


def to_money(value: Any) -> Decimal:  # noqa: ANN401
	"""
	Coerce a numeric payload value into a two-decimal ``Decimal``.

	Args:
		value: A number or numeric string.

	Returns:
		Decimal: The value quantized to cents.

	Example:
		>>> to_money("10.5")
		Decimal('10.50')
	"""
	return Decimal(str(value)).quantize(Decimal("0.01"))
