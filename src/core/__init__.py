"""
Core arithmetic utilities and value objects.

Stateless, side-effect free building blocks used by the translation
test harness as sample input.
"""
