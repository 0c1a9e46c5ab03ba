"""Canonical format patterns used by the factory validators. ASCII digits only."""
import re

UUID_V4 = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-4[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}")

# Optional sign, integer part, optional fraction
NUMBER = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")

ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")
