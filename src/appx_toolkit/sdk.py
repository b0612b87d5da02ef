"""
宿主机 Windows 10 SDK（UAP 平台）探测，以及把 SDK 版本写入 `.jsproj` 项目文件。

仅在 Windows 宿主上有意义；未安装 SDK 时所有步骤都是空操作。
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping

from .manifest_xml import load_xml, save_xml
from .version import Version

PROJECT_WINDOWS10 = "CordovaApp.Windows10.jsproj"


def is_windows_host() -> bool:
    return sys.platform == "win32"


def uap_platforms_dir(env: Mapping[str, str] | None = None) -> str:
    """返回 `Windows Kits\\10\\Platforms\\UAP` 目录；找不到 Program Files 时返回空串。"""
    env = os.environ if env is None else env
    program_files = env.get("ProgramFiles(x86)") or env.get("ProgramFiles")
    if not program_files:
        return ""
    return os.path.join(program_files, "Windows Kits", "10", "Platforms", "UAP")


def get_available_uap_versions(env: Mapping[str, str] | None = None) -> list[Version]:
    """列出已安装的 UAP SDK 版本（子目录名即版本号）。"""
    uap_dir = uap_platforms_dir(env)
    if not uap_dir or not os.path.isdir(uap_dir):
        return []

    out: list[Version] = []
    for name in sorted(os.listdir(uap_dir)):
        if not os.path.isdir(os.path.join(uap_dir, name)):
            continue
        version = Version.try_parse(name)
        if version is not None:
            out.append(version)
    return out


def get_uap_versions(env: Mapping[str, str] | None = None) -> tuple[Version, Version] | None:
    """返回 `(最低版本, 目标版本)`；没有可用 SDK 时返回 `None`。"""
    versions = get_available_uap_versions(env)
    if not versions:
        return None
    return min(versions), max(versions)


def apply_uap_version_to_project(project_path: str, versions: tuple[Version, Version] | None) -> None:
    """写入 `TargetPlatformVersion` / `TargetPlatformMinVersion`，其余内容保持不变。"""
    if versions is None:
        return
    min_version, target_version = versions

    tree = load_xml(project_path)
    root = tree.getroot()
    tpv = root.find("{*}PropertyGroup/{*}TargetPlatformVersion")
    tpmv = root.find("{*}PropertyGroup/{*}TargetPlatformMinVersion")
    if tpv is None or tpmv is None:
        raise RuntimeError(
            f"project file has no TargetPlatformVersion/TargetPlatformMinVersion: {project_path}"
        )

    tpv.text = str(target_version)
    tpmv.text = str(min_version)
    save_xml(project_path, tree)
