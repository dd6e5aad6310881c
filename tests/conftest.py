# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for tostring testing.

Sample classes live in the test modules that use them so that their
annotations resolve against plain module globals.
"""

from __future__ import annotations

import logging

import pytest

from tostring import ToStringMethodBuilder


@pytest.fixture
def fields_renderer():
    """Factory building a renderer that only uses fields."""

    def build(target_type: type):
        return ToStringMethodBuilder(target_type).use_fields().build()

    return build


@pytest.fixture
def properties_renderer():
    """Factory building a renderer that only uses properties."""

    def build(target_type: type):
        return ToStringMethodBuilder(target_type).use_properties().build()

    return build


@pytest.fixture
def debug_logs(caplog):
    """Capture DEBUG records emitted by the package."""
    caplog.set_level(logging.DEBUG, logger="tostring")
    return caplog
