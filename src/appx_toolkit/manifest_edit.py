"""
appx 清单字段修改函数。

每个函数都只定位并修改清单树中的特定节点/属性，彼此独立且幂等：
对已处理过的清单再次执行不会产生变化。`prefix` 为方言的命名空间前缀（如 `m2:`）。
"""

from __future__ import annotations

import re

from lxml import etree

from .descriptor import Descriptor
from .manifest_xml import find, find_child, sub_element
from .pipeline_utils import warn
from .version import fix_config_version

# 清单 schema 对 Application@Id 的长度限制。
MAX_APPLICATION_ID_LENGTH = 64

DEFAULT_START_PAGE = "index.html"
DEFAULT_URI_PREFIX = "ms-appx-web://"
CONTENT_PREFIX = "www/"
LOCAL_WEB_RULE = "ms-appx-web:///"

ORIENTATIONS = {
    "default": ["portrait", "landscape", "landscapeFlipped"],
    "portrait": ["portrait"],
    "landscape": ["landscape", "landscapeFlipped"],
}

_URI_SCHEME_RE = re.compile(r"^[\w-]+?://", re.IGNORECASE)
# `ms-appx://` 与 `ms-appx:///` 都表示包根目录。
_PACKAGE_ROOT_PREFIX_RE = re.compile(r"^ms-appx:///?$", re.IGNORECASE)
_NAVIGATION_SCHEME_RE = re.compile(r"^(?:https?|ms-appx-web)://", re.IGNORECASE)
_LOCAL_WEB_RULE_RE = re.compile(r"^ms-appx-web:///$", re.IGNORECASE)


def _require(node: etree._Element | None, tag: str, manifest_path: str) -> etree._Element:
    if node is None:
        raise SystemExit(f"Error: invalid manifest file (no <{tag}> node): {manifest_path}")
    return node


def is_package_root_prefix(uri_prefix: str) -> bool:
    return bool(_PACKAGE_ROOT_PREFIX_RE.match(uri_prefix or ""))


def apply_core_properties(
    descriptor: Descriptor,
    root: etree._Element,
    manifest_path: str,
    prefix: str,
    targets_uap: bool,
) -> None:
    """写入包标识、版本、发布者、显示名称、启动页与屏幕方向。"""
    version = fix_config_version(descriptor.windows_package_version or descriptor.version)
    name = descriptor.name
    # 商店会分配上传用的包名，允许通过 Windows 专用偏好覆盖。
    pkg_name = descriptor.get_preference("WindowsStoreIdentityName") or descriptor.package_name
    author = descriptor.author

    identity = _require(find(root, "Identity"), "Identity", manifest_path)
    if pkg_name:
        identity.set("Name", pkg_name)
    if version:
        identity.set("Version", version)
    publisher_id = descriptor.publisher_id
    if publisher_id and identity.get("Publisher") != publisher_id:
        identity.set("Publisher", publisher_id)

    app = _require(find(root, "Application"), "Application", manifest_path)
    if descriptor.package_name:
        app.set("Id", descriptor.package_name[:MAX_APPLICATION_ID_LENGTH])

    apply_start_page(app, descriptor, targets_uap)

    visual_elements_name = f"{prefix}VisualElements"
    visual_elems = _require(find(root, visual_elements_name), visual_elements_name, manifest_path)
    if name:
        visual_elems.set("DisplayName", name)

    display_name = descriptor.get_preference("WindowsStoreDisplayName") or name
    publisher_name = descriptor.get_preference("WindowsStorePublisherName") or author

    properties = find(root, "Properties")
    if properties is not None:
        display_name_el = find(properties, "DisplayName")
        if display_name_el is not None and display_name:
            display_name_el.text = display_name
        publisher_name_el = find(properties, "PublisherDisplayName")
        if publisher_name_el is not None and publisher_name:
            publisher_name_el.text = publisher_name

    apply_orientation(descriptor, visual_elems, prefix)


def apply_orientation(descriptor: Descriptor, visual_elems: etree._Element, prefix: str) -> None:
    """
    按 `Orientation` 偏好重建 `<InitialRotationPreference>`。

    未设置偏好时删除该节点，回退为平台默认方向。
    """
    root_name = f"{prefix}InitialRotationPreference"
    orientation = descriptor.get_preference("Orientation")
    rotation_root = find(visual_elems, root_name)

    if not orientation:
        if rotation_root is not None:
            rotation_root.getparent().remove(rotation_root)
        return

    if rotation_root is None:
        rotation_root = sub_element(visual_elems, root_name)
    rotation_root.clear()

    values = ORIENTATIONS.get(orientation, orientation.split(","))
    for value in values:
        sub_element(rotation_root, f"{prefix}Rotation", {"Preference": value})


def resolve_start_page(descriptor: Descriptor, targets_uap: bool) -> str:
    """计算 Application@StartPage 的最终值。"""
    start_page = descriptor.start_page or DEFAULT_START_PAGE

    uri_prefix = ""
    # 仅 Windows 10 在启动页没有 URI scheme 时补前缀。
    if targets_uap and not _URI_SCHEME_RE.match(start_page):
        uri_prefix = descriptor.get_preference("WindowsDefaultUriPrefix") or DEFAULT_URI_PREFIX
        if is_package_root_prefix(uri_prefix):
            # ms-appx:// 无法通过 Windows 10 的 schema 校验，按根目录处理。
            uri_prefix = ""

    content_prefix = CONTENT_PREFIX
    if uri_prefix.lower().startswith("http") or start_page.lower().startswith("http"):
        content_prefix = ""
    elif uri_prefix.lower().startswith("ms-appx") and uri_prefix.endswith("://"):
        uri_prefix += "/"

    return uri_prefix + content_prefix + start_page


def apply_start_page(app: etree._Element, descriptor: Descriptor, targets_uap: bool) -> None:
    app.set("StartPage", resolve_start_page(descriptor, targets_uap))


def _create_application_content_uri_rules(
    root: etree._Element,
    rules_element_name: str,
    rule_element_name: str,
    origins: list[str],
    common_attributes: dict[str, str],
) -> None:
    """删除旧的规则节点并按 `origins` 重建；无规则时不保留该节点。"""
    app = find(root, "Application")
    existing = find_child(app, rules_element_name)
    if existing is not None:
        app.remove(existing)

    if not origins:
        return

    rules = sub_element(app, rules_element_name)
    for origin in origins:
        sub_element(rules, rule_element_name, {"Match": origin, **common_attributes})


def filter_access_rules(rules: list[str] | tuple[str, ...]) -> list[str]:
    """保留 `https://` 与 `*` 规则；出现 `*` 时不输出任何规则。"""
    kept: list[str] = []
    for rule in rules:
        if rule.startswith("https://") or rule == "*":
            kept.append(rule)
        else:
            warn(f'Access rules must begin with "https://", the following rule will be ignored: {rule}')
    if "*" in kept:
        return []
    return kept


def filter_navigation_whitelist(rules: list[str] | tuple[str, ...], default_uri_prefix: str) -> list[str]:
    """保留 http/https/ms-appx-web 规则，并按需补 `ms-appx-web:///`。"""
    kept: list[str] = []
    for rule in rules:
        if _NAVIGATION_SCHEME_RE.match(rule):
            kept.append(rule)
        else:
            warn(f'The following navigation rule had an invalid URI scheme and is ignored: "{rule}".')

    if not is_package_root_prefix(default_uri_prefix):
        if not any(_LOCAL_WEB_RULE_RE.match(rule) for rule in kept):
            kept.append(LOCAL_WEB_RULE)
    return kept


def apply_access_rules(descriptor: Descriptor, root: etree._Element, targets_uap: bool) -> None:
    """
    写入 `<ApplicationContentUriRules>`::

        <ApplicationContentUriRules>
            <Rule Match="https://www.example.com" Type="include"/>
        </ApplicationContentUriRules>
    """
    if targets_uap:
        apply_navigation_whitelist(descriptor, root)
        return

    rules = filter_access_rules(descriptor.access_rules)
    _create_application_content_uri_rules(
        root, "ApplicationContentUriRules", "Rule", rules, {"Type": "include"}
    )


def apply_navigation_whitelist(descriptor: Descriptor, root: etree._Element) -> None:
    """Windows 10：按 `<allow-navigation>` 允许对应源访问 WinRT。"""
    rules = filter_navigation_whitelist(
        descriptor.navigation_whitelist_rules,
        descriptor.get_preference("WindowsDefaultUriPrefix"),
    )
    _create_application_content_uri_rules(
        root,
        "uap:ApplicationContentUriRules",
        "uap:Rule",
        rules,
        {"Type": "include", "WindowsRuntimeAccess": "all"},
    )


def refine_color(color: str) -> str:
    """规范为 Windows 要求的 `#rrggbb`（不支持 alpha）。"""
    color = color.replace("0x", "").replace("#", "")
    if len(color) == 3:
        color = "".join(c * 2 for c in color)
    if len(color) == 8:
        color = color[2:]
    return "#" + color


def apply_background_color(descriptor: Descriptor, root: etree._Element, prefix: str) -> None:
    for pref_name, element_name in (
        ("BackgroundColor", f"{prefix}VisualElements"),
        ("SplashScreenBackgroundColor", f"{prefix}SplashScreen"),
    ):
        bg_color = descriptor.get_preference(pref_name)
        if not bg_color:
            continue
        el = find(root, element_name)
        if el is not None:
            el.set("BackgroundColor", refine_color(bg_color))


def apply_toast_capability(descriptor: Descriptor, root: etree._Element, prefix: str) -> None:
    """根据 `WindowsToastCapable` 设置或移除 VisualElements@ToastCapable。"""
    is_toast_capable = descriptor.get_preference("WindowsToastCapable").lower() == "true"
    visual_elems = find(root, f"{prefix}VisualElements")
    if visual_elems is None:
        return
    if is_toast_capable:
        visual_elems.set("ToastCapable", "true")
    elif "ToastCapable" in visual_elems.attrib:
        del visual_elems.attrib["ToastCapable"]
