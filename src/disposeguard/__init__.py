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
"""disposeguard — refuse method calls on objects that have been disposed.

The entry point is :func:`create`, which takes a method name and a value
and returns either the value itself or a wrapper that checks
``is_disposed()`` on the receiver before delegating::

    from disposeguard import create

    Connection.query = create("query", Connection.query)
"""

from disposeguard.guard import (
    RESERVED_NAMES,
    create,
    is_guarded,
    is_reserved,
    should_guard,
)
from disposeguard.kernel import (
    Disposable,
    DisposedCheckMissingException,
    DisposeGuardException,
    ObjectDisposedException,
)

__all__ = [
    "RESERVED_NAMES",
    "Disposable",
    "DisposeGuardException",
    "DisposedCheckMissingException",
    "ObjectDisposedException",
    "create",
    "is_guarded",
    "is_reserved",
    "should_guard",
]
