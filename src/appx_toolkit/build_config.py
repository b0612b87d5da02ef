"""
生成打包证书 / 默认语言的 MSBuild `.projitems` 构建配置文件。
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping

from lxml import etree

from .descriptor import Descriptor

MSBUILD_NS = "http://schemas.microsoft.com/developer/msbuild/2003"
DEFAULT_CERTIFICATE_KEY_FILE = "CordovaApp_TemporaryKey.pfx"
DEFAULT_LOCALE = "en-US"
DEBUG_PROJITEMS = "CordovaAppDebug.projitems"
RELEASE_PROJITEMS = "CordovaAppRelease.projitems"

HEADER = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<!--\n"
    "    This file is automatically generated.\n"
    "    Do not modify this file - YOUR CHANGES WILL BE ERASED!\n"
    "-->\n"
)


def load_build_options(path: str, build_type: str) -> dict[str, str]:
    """读取 `build.json` 的 `windows.<buildType>` 段，并附带 `buildType`。"""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SystemExit(f"Error: failed to read build config {path}: {e}") from e

    section = {}
    if isinstance(data, dict):
        windows = data.get("windows")
        if isinstance(windows, dict) and isinstance(windows.get(build_type), dict):
            section = windows[build_type]

    out = {k: str(v) for k, v in section.items() if v is not None}
    out["buildType"] = build_type
    return out


def _build_config_xml(descriptor: Descriptor, platform_root: str) -> etree._Element:
    root = etree.Element(f"{{{MSBUILD_NS}}}Project", nsmap={None: MSBUILD_NS})
    property_group = etree.SubElement(root, f"{{{MSBUILD_NS}}}PropertyGroup")
    item_group = etree.SubElement(root, f"{{{MSBUILD_NS}}}ItemGroup")

    key_file = descriptor.option("packageCertificateKeyFile")
    if key_file:
        # 证书路径统一转为相对平台根目录。
        key_file = os.path.relpath(key_file, platform_root)
    else:
        key_file = DEFAULT_CERTIFICATE_KEY_FILE

    etree.SubElement(property_group, f"{{{MSBUILD_NS}}}PackageCertificateKeyFile").text = key_file
    etree.SubElement(item_group, f"{{{MSBUILD_NS}}}None", Include=key_file)

    thumbprint = descriptor.option("packageThumbprint")
    if thumbprint:
        etree.SubElement(property_group, f"{{{MSBUILD_NS}}}PackageCertificateThumbprint").text = thumbprint

    locale = descriptor.option("defaultLocale") or descriptor.default_locale or DEFAULT_LOCALE
    etree.SubElement(property_group, f"{{{MSBUILD_NS}}}DefaultLanguage").text = locale
    return root


def build_config_path(platform_root: str, build_type: str) -> str:
    name = RELEASE_PROJITEMS if build_type == "release" else DEBUG_PROJITEMS
    return os.path.join(platform_root, name)


def update_build_config(
    platform_root: str,
    descriptor: Descriptor,
    build_options: Mapping[str, object] | None = None,
) -> str:
    """合并构建参数后写出 debug/release 对应的 `.projitems`，返回写出路径。"""
    options = dict(build_options or {})
    descriptor = descriptor.with_build_options(options)

    root = _build_config_xml(descriptor, platform_root)
    etree.indent(root, space="  ")
    body = etree.tostring(root, encoding="unicode")

    path = build_config_path(platform_root, descriptor.option("buildType"))
    with open(path, "w", encoding="utf-8") as f:
        f.write(HEADER + body + "\n")
    return path
