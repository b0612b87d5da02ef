"""
平台无关的应用描述文件（Cordova 风格 `config.xml`）读取模块。

只做读取，不做校验；平台相关的 `<platform name="windows">` 段落会与全局声明合并，
偏好项名称大小写不敏感，平台段优先。
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from lxml import etree

from .types import ImageResource, Preference

PLATFORM_NAME = "windows"


@dataclass(frozen=True)
class Descriptor:
    """描述文件的只读视图，单次转换期间保持不变。"""

    name: str = ""
    author: str = ""
    version: str = ""
    windows_package_version: str = ""
    package_name: str = ""
    start_page: str = ""
    default_locale: str = ""
    preferences: tuple[Preference, ...] = ()
    access_rules: tuple[str, ...] = ()
    navigation_whitelist_rules: tuple[str, ...] = ()
    icons: tuple[ImageResource, ...] = ()
    splash_screens: tuple[ImageResource, ...] = ()
    # 外部构建参数（`build.json` / 命令行），与描述文件键冲突时以此为准。
    build_options: Mapping[str, str] = field(default_factory=dict)

    def get_preference(self, name: str) -> str:
        """按名称（大小写不敏感）取偏好值，未设置时返回空字符串。"""
        key = name.lower()
        value = ""
        for pref in self.preferences:
            if pref.name.lower() == key:
                value = pref.value
        return value

    def get_matching_preferences(self, pattern: re.Pattern[str]) -> list[Preference]:
        """返回名称匹配正则（`search` 语义）的全部偏好项。"""
        return [p for p in self.preferences if pattern.search(p.name)]

    def option(self, name: str) -> str:
        """取外部构建参数，缺失时返回空字符串。"""
        value = self.build_options.get(name)
        return str(value) if value is not None else ""

    @property
    def publisher_id(self) -> str:
        return self.option("publisherId")

    def with_build_options(self, options: Mapping[str, object]) -> Descriptor:
        """合并外部构建参数，返回新的描述对象。"""
        merged = dict(self.build_options)
        for key, value in options.items():
            if value is None:
                continue
            merged[key] = value if isinstance(value, str) else str(value)
        return dataclasses.replace(self, build_options=merged)


def _text(parent: etree._Element, tag: str) -> str:
    el = parent.find(f"{{*}}{tag}")
    if el is None or el.text is None:
        return ""
    return el.text.strip()


def _int_attr(el: etree._Element, key: str) -> int | None:
    raw = (el.get(key) or "").strip()
    return int(raw) if raw.isdigit() else None


def _scopes(root: etree._Element) -> list[etree._Element]:
    """全局段在前、windows 平台段在后，后者覆盖前者。"""
    out = [root]
    for platform in root.iterfind("{*}platform"):
        if (platform.get("name") or "").lower() == PLATFORM_NAME:
            out.append(platform)
    return out


def _images(scopes: list[etree._Element], tag: str) -> tuple[ImageResource, ...]:
    out: list[ImageResource] = []
    for scope in scopes:
        for el in scope.iterfind(f"{{*}}{tag}"):
            src = el.get("src") or ""
            if not src:
                continue
            out.append(
                ImageResource(
                    src=src,
                    target=el.get("target") or "",
                    width=_int_attr(el, "width"),
                    height=_int_attr(el, "height"),
                )
            )
    return tuple(out)


def parse_descriptor(data: bytes) -> Descriptor:
    """从 `config.xml` 内容构建 `Descriptor`。"""
    start = data.find(b"<")
    root = etree.fromstring(data[start:] if start > 0 else data)
    scopes = _scopes(root)

    prefs: list[Preference] = []
    access: list[str] = []
    navigation: list[str] = []
    for scope in scopes:
        for el in scope.iterfind("{*}preference"):
            name = el.get("name")
            if name:
                prefs.append(Preference(name=name, value=el.get("value") or ""))
        for el in scope.iterfind("{*}access"):
            origin = el.get("origin")
            if origin:
                access.append(origin)
        for el in scope.iterfind("{*}allow-navigation"):
            href = el.get("href")
            if href:
                navigation.append(href)

    content = root.find("{*}content")
    start_page = content.get("src", "") if content is not None else ""

    return Descriptor(
        name=_text(root, "name"),
        author=_text(root, "author"),
        version=root.get("version") or "",
        windows_package_version=root.get("windows-packageVersion") or "",
        package_name=root.get("id") or "",
        start_page=start_page,
        default_locale=root.get("defaultlocale") or "",
        preferences=tuple(prefs),
        access_rules=tuple(access),
        navigation_whitelist_rules=tuple(navigation),
        icons=_images(scopes, "icon"),
        splash_screens=_images(scopes, "splash"),
    )


def load_descriptor(path: str) -> Descriptor:
    """从磁盘读取 `config.xml`。"""
    with open(path, "rb") as f:
        data = f.read()
    try:
        return parse_descriptor(data)
    except etree.XMLSyntaxError as e:
        raise SystemExit(f"Error: invalid config file {path}: {e}") from e
