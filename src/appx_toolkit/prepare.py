from __future__ import annotations

"""
Windows platform prepare pipeline.

High-level flow:
1) For each appx manifest dialect (Windows 8.1, Windows 8, Windows 10, Phone 8.1):
   load the manifest, strip any BOM, apply descriptor values in a fixed order and
   write it back once.
2) On a Windows host, write the installed UAP SDK range into the Windows 10 project.
3) Copy icons / splash screens into `images/` (optional).
"""

import os
from collections.abc import Sequence

from lxml import etree

from . import images, sdk
from .capabilities import (
    check_for_restricted_capabilities,
    ensure_uap_prefixed_capabilities,
    sort_capabilities,
)
from .descriptor import Descriptor
from .manifest_edit import (
    apply_access_rules,
    apply_background_color,
    apply_core_properties,
    apply_toast_capability,
)
from .manifest_xml import find, load_xml, save_xml
from .pipeline_utils import require_file, warn
from .types import ManifestTarget
from .uap_versions import apply_target_platform_version
from .version import InvalidVersionError

MANIFEST_WINDOWS8 = "package.windows80.appxmanifest"
MANIFEST_WINDOWS = "package.windows.appxmanifest"
MANIFEST_PHONE = "package.phone.appxmanifest"
MANIFEST_WINDOWS10 = "package.windows10.appxmanifest"

MANIFEST_TARGETS: tuple[ManifestTarget, ...] = (
    ManifestTarget(MANIFEST_WINDOWS, "m2:"),
    ManifestTarget(MANIFEST_WINDOWS8, ""),
    ManifestTarget(MANIFEST_WINDOWS10, "uap:", targets_uap=True),
    ManifestTarget(MANIFEST_PHONE, "m3:"),
)


def transform_manifest(
    descriptor: Descriptor,
    root: etree._Element,
    manifest_path: str,
    namespace_prefix: str,
    targets_uap: bool,
) -> None:
    """按固定顺序把描述文件的值应用到内存中的清单树。"""
    apply_core_properties(descriptor, root, manifest_path, namespace_prefix, targets_uap)
    # 部分校验器要求能力节点按名称排序。
    sort_capabilities(root)
    apply_access_rules(descriptor, root, targets_uap)
    apply_background_color(descriptor, root, namespace_prefix)
    apply_toast_capability(descriptor, root, namespace_prefix)

    if targets_uap:
        try:
            apply_target_platform_version(descriptor, root)
        except InvalidVersionError as e:
            raise SystemExit(f"Error: {e} ({manifest_path})") from e
        check_for_restricted_capabilities(descriptor, root)
        ensure_uap_prefixed_capabilities(find(root, "Capabilities"))


def update_manifest_file(
    descriptor: Descriptor,
    manifest_path: str,
    namespace_prefix: str,
    targets_uap: bool,
) -> None:
    """读取、转换并一次性写回单个清单；出错时文件保持不变。"""
    require_file(manifest_path, "manifest")
    try:
        tree = load_xml(manifest_path)
    except etree.XMLSyntaxError as e:
        raise SystemExit(f"Error: invalid manifest file {manifest_path}: {e}") from e

    transform_manifest(descriptor, tree.getroot(), manifest_path, namespace_prefix, targets_uap)
    save_xml(manifest_path, tree)


def apply_uap_version_to_project(platform_root: str) -> None:
    """宿主机 SDK 步骤：失败只告警，不中断其余流程。"""
    project_path = os.path.join(platform_root, sdk.PROJECT_WINDOWS10)
    try:
        sdk.apply_uap_version_to_project(project_path, sdk.get_uap_versions())
    except (OSError, RuntimeError, ValueError, etree.XMLSyntaxError) as e:
        warn(f"failed to apply UAP SDK versions to {project_path}: {e}")


def apply_platform_config(
    platform_root: str,
    descriptor: Descriptor,
    *,
    app_root: str = "",
    copy_images: bool = True,
    targets: Sequence[ManifestTarget] = MANIFEST_TARGETS,
    verbose: bool = False,
) -> None:
    """对全部清单执行转换，随后处理 SDK 版本与图片资源。"""
    for target in targets:
        manifest_path = os.path.join(platform_root, target.file_name)
        if verbose:
            print(f"Updating manifest: {manifest_path}")
        update_manifest_file(descriptor, manifest_path, target.namespace_prefix, target.targets_uap)

    if sdk.is_windows_host():
        apply_uap_version_to_project(platform_root)

    if copy_images:
        app_root = app_root or os.path.join(platform_root, "..", "..")
        images.copy_images(descriptor, platform_root, app_root, verbose=verbose)
