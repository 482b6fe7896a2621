# SPDX-License-Identifier: MIT
"""Pytest configuration for version tests."""

from hypothesis import HealthCheck, settings

# Hypothesis builds its charmap cache on the first from_regex draw (~3s on a
# cold checkout), which otherwise trips the too_slow health check.
settings.register_profile("wapm", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("wapm")
