from __future__ import annotations

from typing import Mapping, Protocol


class AppConfigRepository(Protocol):
    def get_all(self) -> dict[str, str]:
        raise NotImplementedError

    def upsert_many(self, values: Mapping[str, str]) -> None:
        raise NotImplementedError
