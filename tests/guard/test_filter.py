# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for method-name filtering."""

import pytest

from disposeguard.guard.filter import RESERVED_NAMES, is_reserved, should_guard


def _method(self):
    return None


class TestReservedNames:
    def test_reserved_set(self):
        assert RESERVED_NAMES == frozenset({"__init__", "is_disposed"})

    def test_is_reserved(self):
        assert is_reserved("__init__")
        assert is_reserved("is_disposed")
        assert not is_reserved("dispose")
        assert not is_reserved("isDisposed")


class TestShouldGuard:
    @pytest.mark.parametrize("name", ["query", "dispose", "close", "__call__"])
    def test_callables_under_other_names_are_guarded(self, name):
        assert should_guard(name, _method)

    @pytest.mark.parametrize("name", sorted(RESERVED_NAMES))
    def test_reserved_names_are_not_guarded(self, name):
        assert not should_guard(name, _method)

    @pytest.mark.parametrize("value", ["label", 3, None, property(_method)])
    def test_non_callables_are_not_guarded(self, value):
        assert not should_guard("label", value)

    def test_descriptors_without_receiver_are_not_guarded(self):
        assert not should_guard("build", staticmethod(_method))
        assert not should_guard("build", classmethod(_method))

    def test_callable_objects_are_guarded(self):
        class Handler:
            def __call__(self, receiver):
                return receiver

        assert should_guard("handle", Handler())
