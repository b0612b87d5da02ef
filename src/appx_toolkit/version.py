"""
Windows SDK / 包版本号解析与比较。

版本号固定为四段 `major.minor.build.revision`，缺省段按 0 补齐，
因此比较时可直接按元组逐段比较。
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_VERSION_RE = re.compile(r"^[0-9]+(?:\.[0-9]+){0,3}$")
_VERSION_GROUP_RE = re.compile(r"\.[0-9]")


class InvalidVersionError(ValueError):
    """版本字符串无法解析时抛出。"""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


@dataclass(frozen=True, order=True)
class Version:
    """四段式版本号，按 `(major, minor, build, revision)` 排序。"""

    major: int
    minor: int = 0
    build: int = 0
    revision: int = 0

    def __post_init__(self) -> None:
        for part in (self.major, self.minor, self.build, self.revision):
            if part < 0:
                raise InvalidVersionError(str(part), "version components must be non-negative")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}.{self.revision}"

    @classmethod
    def parse(cls, text: str) -> Version:
        """解析 1~4 段的点分数字版本，格式错误时抛出 `InvalidVersionError`。"""
        if not isinstance(text, str):
            raise InvalidVersionError(str(text), f"Version must be a string, got {type(text).__name__}")
        s = text.strip()
        if not _VERSION_RE.match(s):
            raise InvalidVersionError(text)
        return cls(*(int(p) for p in s.split(".")))

    @classmethod
    def try_parse(cls, text: str) -> Version | None:
        """同 `parse`，失败时返回 `None`。"""
        try:
            return cls.parse(text)
        except InvalidVersionError:
            return None


BASE_UAP_VERSION = Version(10, 0, 10240, 0)


def fix_config_version(version: str | None) -> str | None:
    """
    将包版本补齐为四段（`1.2` -> `1.2.0.0`）。

    只有包含至少一个 `.数字` 分组时才补齐；`"1"`、空值等原样返回。
    """
    if not version:
        return version
    groups = _VERSION_GROUP_RE.findall(version)
    if not groups:
        return version
    count = len(groups) + 1
    while count < 4:
        version += ".0"
        count += 1
    return version
