#!/usr/bin/env python
import os
import sys


def main() -> None:
	"""Run administrative tasks."""
	os.environ.setdefault("DJANGO_SETTINGS_MODULE", "dynasty.settings")

	from django.core.management import execute_from_command_line  # noqa: PLC0415

	execute_from_command_line(sys.argv)


if __name__ == "__main__":
	main()
