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
"""Tests for the disposeguard exception hierarchy."""

from disposeguard.kernel.exceptions import (
    OBJECT_DISPOSED_MESSAGE,
    DisposedCheckMissingException,
    DisposeGuardException,
    ObjectDisposedException,
)


class TestDisposeGuardException:
    def test_basic_creation(self):
        exc = DisposeGuardException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = DisposeGuardException("bad", code="X_001", context={"id": "123"})
        assert exc.code == "X_001"
        assert exc.context["id"] == "123"

    def test_context_defaults_to_empty_dict(self):
        exc = DisposeGuardException("test")
        exc.context["key"] = "value"
        exc2 = DisposeGuardException("test2")
        assert exc2.context == {}


class TestObjectDisposedException:
    def test_fixed_message(self):
        assert OBJECT_DISPOSED_MESSAGE == "Object is disposed"
        assert str(ObjectDisposedException()) == "Object is disposed"
        assert str(ObjectDisposedException("query", object())) == "Object is disposed"

    def test_is_type_error(self):
        assert issubclass(ObjectDisposedException, TypeError)
        assert issubclass(ObjectDisposedException, DisposeGuardException)

    def test_context(self):
        class Connection:
            pass

        exc = ObjectDisposedException("query", Connection())
        assert exc.code == "OBJECT_DISPOSED"
        assert exc.context == {"method": "query", "receiver": "Connection"}

    def test_context_empty_without_details(self):
        assert ObjectDisposedException().context == {}


class TestDisposedCheckMissingException:
    def test_is_attribute_error(self):
        assert issubclass(DisposedCheckMissingException, AttributeError)
        assert issubclass(DisposedCheckMissingException, DisposeGuardException)

    def test_message_names_receiver_type(self):
        exc = DisposedCheckMissingException("query", 42)
        assert str(exc) == "'int' object has no callable 'is_disposed'"
        assert exc.code == "DISPOSED_CHECK_MISSING"
        assert exc.context == {"method": "query", "receiver": "int"}

    def test_catch_all_library_exceptions(self):
        for exc in (ObjectDisposedException(), DisposedCheckMissingException()):
            try:
                raise exc
            except DisposeGuardException as caught:
                assert caught is exc
