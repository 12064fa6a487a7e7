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
"""Integration tests — guarding every member of a disposable class."""

from __future__ import annotations

import pytest

import disposeguard
from disposeguard import Disposable, ObjectDisposedException, create


def _make_disposable() -> type:
    class DisposableClass:
        def __init__(self) -> None:
            self._is_disposed = False

        def is_disposed(self) -> bool:
            return self._is_disposed

        def dispose(self) -> DisposableClass:
            self._is_disposed = True
            return self

    return DisposableClass


def _guard_members(cls: type) -> None:
    for name, value in list(vars(cls).items()):
        guarded = create(name, value)
        if guarded is not value:
            setattr(cls, name, guarded)


class TestGuardedClass:
    def test_non_reserved_methods_are_guarded(self):
        cls = _make_disposable()

        def set_(self, key, value):
            setattr(self, f"_{key}", value)

        def get(self, key):
            return getattr(self, f"_{key}")

        cls.set = set_
        cls.get = get
        _guard_members(cls)

        instance = cls()
        instance.set("foo", "bar")
        assert instance.get("foo") == "bar"

        instance.dispose()

        with pytest.raises(TypeError):
            instance.set("foo", "baz")
        with pytest.raises(TypeError):
            instance.get("foo")

    def test_reserved_methods_stay_callable(self):
        cls = _make_disposable()
        _guard_members(cls)

        instance = cls()
        instance.dispose()

        assert instance.is_disposed() is True

    def test_non_function_members_untouched(self):
        cls = _make_disposable()
        cls.key = "value"
        _guard_members(cls)

        assert cls().key == "value"

    def test_dispose_is_guarded(self):
        cls = _make_disposable()
        _guard_members(cls)

        instance = cls()
        assert instance.dispose() is instance

        with pytest.raises(ObjectDisposedException, match="Object is disposed"):
            instance.dispose()

    def test_instances_are_independent(self):
        cls = _make_disposable()
        _guard_members(cls)

        first, second = cls(), cls()
        first.dispose()

        assert second.dispose() is second

    def test_receiver_satisfies_protocol(self):
        cls = _make_disposable()
        _guard_members(cls)
        assert isinstance(cls(), Disposable)


class TestPackageExports:
    def test_create_is_exported(self):
        assert callable(disposeguard.create)
        assert disposeguard.create is create

    def test_all_names_resolve(self):
        for name in disposeguard.__all__:
            assert hasattr(disposeguard, name)
