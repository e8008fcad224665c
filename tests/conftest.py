"""Pytest configuration and shared fixtures."""

from hypothesis import HealthCheck, settings

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile(
    "no_deadline",
    deadline=None,
    suppress_health_check=[HealthCheck.filter_too_much],
)
settings.load_profile("no_deadline")
