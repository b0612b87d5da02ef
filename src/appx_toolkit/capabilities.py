"""
appx 清单 `<Capabilities>` 相关规则：排序、受限能力检测与 `uap:` 前缀补齐。
"""

from __future__ import annotations

import re

from lxml import etree

from .descriptor import Descriptor
from .manifest_xml import find, is_element, local_name, namespace_for, rename
from .pipeline_utils import warn

# 允许访问远程内容时，公开商店不接受的能力。
UAP_RESTRICTED_CAPS = (
    "enterpriseAuthentication",
    "sharedUserCertificates",
    "documentsLibrary",
    "musicLibrary",
    "picturesLibrary",
    "videosLibrary",
    "removableStorage",
    "internetClientServer",
    "privateNetworkClientServer",
)

# 来自 AppxManifestTypes.xsd 的 ST_Capability_Uap，必须声明在 uap 命名空间下。
CAPS_NEEDING_UAPNS = (
    "documentsLibrary",
    "picturesLibrary",
    "videosLibrary",
    "musicLibrary",
    "enterpriseAuthentication",
    "sharedUserCertificates",
    "removableStorage",
    "appointments",
    "contacts",
    "userAccountInformation",
    "phoneCall",
    "blockedChatMessages",
    "objects3D",
)

_REMOTE_URI_RE = re.compile(r"(https?|ms-appx-web)://", re.IGNORECASE)


def _capability_children(capabilities: etree._Element) -> list[etree._Element]:
    return [el for el in capabilities if is_element(el)]


def sort_capabilities(root: etree._Element) -> None:
    """
    按去掉前缀后的标签名对 `<Capabilities>` 子节点做稳定排序。

    `m3:Capability` 与 `Capability` 视为同名，保持原相对顺序；
    部分校验器要求 `Capability` 位于 `DeviceCapability` 之前。
    """
    capabilities = find(root, "Capabilities")
    if capabilities is None:
        return
    children = _capability_children(capabilities)
    for el in children:
        capabilities.remove(el)
    for el in sorted(children, key=local_name):
        capabilities.append(el)


def has_remote_uris(descriptor: Descriptor) -> bool:
    """启动页或任一导航白名单规则指向远程/web 上下文时返回 True。"""
    if _REMOTE_URI_RE.search(descriptor.start_page or ""):
        return True
    return any(_REMOTE_URI_RE.search(rule) for rule in descriptor.navigation_whitelist_rules)


def declared_capability_names(capabilities: etree._Element | None) -> list[str]:
    if capabilities is None:
        return []
    return [el.get("Name", "") for el in _capability_children(capabilities)]


def find_restricted_capabilities(capabilities: etree._Element | None) -> list[str]:
    """返回已声明且属于受限列表的能力名（按受限表顺序）。"""
    declared = set(declared_capability_names(capabilities))
    return [cap for cap in UAP_RESTRICTED_CAPS if cap in declared]


def check_for_restricted_capabilities(descriptor: Descriptor, root: etree._Element) -> list[str]:
    """远程内容 + 受限能力同时出现时给出告警，返回命中的能力名。"""
    if not has_remote_uris(descriptor):
        return []
    bad_caps = find_restricted_capabilities(find(root, "Capabilities"))
    if bad_caps:
        warn(
            "The following Capabilities were declared and are restricted: "
            f"{','.join(bad_caps)}. You will be unable to on-board your app to the public "
            "Windows Store with these capabilities and access rules permitting access to remote URIs."
        )
    return bad_caps


def ensure_uap_prefixed_capabilities(capabilities: etree._Element | None) -> None:
    """为需要 uap 命名空间的能力补上 `uap:` 前缀，已带前缀的保持不变。"""
    if capabilities is None:
        return
    for el in _capability_children(capabilities):
        if el.get("Name") not in CAPS_NEEDING_UAPNS:
            continue
        if etree.QName(el).namespace == namespace_for(el, "uap"):
            continue
        rename(el, f"uap:{local_name(el)}")
