"""
Windows 10 (UAP) 目标设备族版本区间的计算与写入。
"""

from __future__ import annotations

import re

from lxml import etree

from .descriptor import Descriptor
from .manifest_xml import find_child, sub_element
from .types import UapVersionRange
from .version import BASE_UAP_VERSION, InvalidVersionError, Version

# 偏好名如 `Windows.Mobile-MinVersion`：
# - group(1)：平台族名（`Windows.Universal`、`Microsoft.Xbox` 等，保留原写法）
# - group(2)：边界字段（`MinVersion` / `MaxVersionTested`，大小写不敏感）
UAP_VERSION_PREFERENCE_RE = re.compile(
    r"(Microsoft.+?|Windows.+?)-(MinVersion|MaxVersionTested)", re.IGNORECASE
)

DEFAULT_PLATFORM_FAMILY = "Windows.Universal"


def get_all_min_max_uap_versions(descriptor: Descriptor) -> dict[str, UapVersionRange]:
    """
    从偏好项中收集各平台族的 Min/Max 版本。

    - 只有 Min：Max 取 Min。
    - 只有 Max：Min 取 Max。
    - Min > Max：Max 提升到 Min。
    - 没有任何匹配偏好：返回 `Windows.Universal` 的基线版本。

    版本字符串格式错误时抛出 `InvalidVersionError`。
    """
    bag: dict[str, dict[str, Version]] = {}
    for pref in descriptor.get_matching_preferences(UAP_VERSION_PREFERENCE_RE):
        m = UAP_VERSION_PREFERENCE_RE.search(pref.name)
        platform_name = m.group(1)
        field = "min" if m.group(2).lower() == "minversion" else "max"

        version = Version.try_parse(pref.value)
        if version is None:
            raise InvalidVersionError(
                pref.value,
                f'Could not comprehend a valid version from the string "{pref.value}" '
                f'of platform-boundary "{pref.name}".',
            )
        bag.setdefault(platform_name, {})[field] = version

    out: dict[str, UapVersionRange] = {}
    for platform_name, bounds in bag.items():
        min_version = bounds.get("min") or bounds.get("max") or BASE_UAP_VERSION
        max_version = bounds.get("max") or min_version
        if min_version > max_version:
            max_version = min_version
        out[platform_name] = UapVersionRange(min_version=min_version, max_version_tested=max_version)

    if not out:
        out[DEFAULT_PLATFORM_FAMILY] = UapVersionRange(
            min_version=BASE_UAP_VERSION, max_version_tested=BASE_UAP_VERSION
        )
    return out


def _create_dependencies(root: etree._Element) -> etree._Element:
    """新建 `<Dependencies>`，按 schema 顺序放在 `<Properties>`（或 `<Identity>`）之后。"""
    dependencies = sub_element(root, "Dependencies")
    for anchor_name in ("Properties", "Identity"):
        anchor = find_child(root, anchor_name)
        if anchor is not None:
            anchor.addnext(dependencies)
            break
    return dependencies


def apply_target_platform_version(descriptor: Descriptor, root: etree._Element) -> None:
    """清空 `<Dependencies>` 后按版本区间重建 `<TargetDeviceFamily>`。"""
    dependencies = find_child(root, "Dependencies")
    if dependencies is None:
        dependencies = _create_dependencies(root)
    for child in list(dependencies):
        dependencies.remove(child)

    for platform_name, versions in get_all_min_max_uap_versions(descriptor).items():
        sub_element(
            dependencies,
            "TargetDeviceFamily",
            {
                "Name": platform_name,
                "MinVersion": str(versions.min_version),
                "MaxVersionTested": str(versions.max_version_tested),
            },
        )

