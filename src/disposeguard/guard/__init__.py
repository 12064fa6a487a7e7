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
"""Method guards that refuse calls on disposed objects."""

from disposeguard.guard.factory import create, is_guarded
from disposeguard.guard.filter import (
    CONSTRUCTOR_NAME,
    DISPOSED_CHECK_NAME,
    RESERVED_NAMES,
    is_reserved,
    should_guard,
)

__all__ = [
    "CONSTRUCTOR_NAME",
    "DISPOSED_CHECK_NAME",
    "RESERVED_NAMES",
    "create",
    "is_guarded",
    "is_reserved",
    "should_guard",
]
