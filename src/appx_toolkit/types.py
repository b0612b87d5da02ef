"""
描述文件、清单目标与版本区间共享的轻量类型定义。
"""

from dataclasses import dataclass

from .version import Version


@dataclass(frozen=True)
class Preference:
    """`config.xml` 中的一条 `<preference name=... value=...>`。"""

    name: str
    value: str


@dataclass(frozen=True)
class ImageResource:
    """一条图标或启动图声明。"""

    src: str
    # `target` 为逻辑目标名（如 `Square44x44Logo`），为空时按尺寸匹配。
    target: str = ""
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True)
class ManifestTarget:
    """单个 appx 清单文件及其方言参数。"""

    file_name: str
    # `namespace_prefix` 形如 `m2:`，旧版 Windows 8 为空字符串。
    namespace_prefix: str
    targets_uap: bool = False


@dataclass(frozen=True)
class UapVersionRange:
    """单个平台族的 `MinVersion` / `MaxVersionTested` 区间。"""

    min_version: Version
    max_version_tested: Version
