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
"""Guard selected methods of a file handler by hand.

Run with ``python -m examples.manual_decoration``.
"""

from __future__ import annotations

from disposeguard import ObjectDisposedException, create
from disposeguard.core.config import Config
from disposeguard.logging import StructlogAdapter

_adapter = StructlogAdapter()
logger = _adapter.get_logger("examples.manual_decoration")


class FileHandler:
    def __init__(self, filename: str) -> None:
        self.filename = filename
        self.content: list[str] = []
        self._disposed = False

    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        self._disposed = True
        self.content = []

    def write(self, data: str) -> int:
        self.content.append(data)
        return len(self.content)

    def read(self) -> str:
        return "\n".join(self.content)

    def get_filename(self) -> str:
        return self.filename


# Only write and read are guarded; get_filename stays usable after disposal.
FileHandler.write = create("write", FileHandler.write)  # type: ignore[method-assign]
FileHandler.read = create("read", FileHandler.read)  # type: ignore[method-assign]


def main() -> None:
    _adapter.configure(Config({}))
    handler = FileHandler("example.txt")
    handler.write("Hello, World!")
    handler.write("This is a test file.")
    logger.info("file content", content=handler.read())

    handler.dispose()

    try:
        handler.write("more")
    except ObjectDisposedException as exc:
        logger.info("expected error", error=str(exc))

    logger.info("still available", filename=handler.get_filename())


if __name__ == "__main__":
    main()
