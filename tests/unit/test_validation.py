# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import pytest

from tostring import ArgumentError, ArgumentNullError, ArgumentRangeError
from tostring.validation import argument, argument_in_range, argument_not_null


class TestValidationHelpers:
    def test_argument_not_null(self):
        argument_not_null("value", "name")
        argument_not_null(0, "count")

        with pytest.raises(ArgumentNullError, match='"name" cannot be None') as info:
            argument_not_null(None, "name")

        assert info.value.argument_name == "name"

    def test_argument(self):
        argument(True, "unused")

        with pytest.raises(ArgumentError, match="must be positive"):
            argument(False, "must be positive")

    @pytest.mark.parametrize("value", [0, 5, 10])
    def test_argument_in_range_inclusive(self, value):
        argument_in_range(value, 0, 10, "index")

    @pytest.mark.parametrize("value", [-1, 11])
    def test_argument_out_of_range(self, value):
        with pytest.raises(ArgumentRangeError, match='"index" must be between 0 and 10'):
            argument_in_range(value, 0, 10, "index")

    def test_argument_errors_are_value_errors(self):
        assert issubclass(ArgumentNullError, ValueError)
        assert issubclass(ArgumentRangeError, ArgumentError)
