"""
`appx-toolkit` 的命令行入口模块。

负责收集平台目录、描述文件与构建参数，先生成构建配置，再调用
`appx_toolkit.prepare.apply_platform_config` 更新各 appx 清单。
"""

import argparse
import os
from collections.abc import Sequence

from .build_config import load_build_options, update_build_config
from .descriptor import load_descriptor
from .pipeline_utils import require_file
from .prepare import apply_platform_config


def _log_step(message: str) -> None:
    """输出简洁的流程阶段提示。"""
    print(f"[appx-toolkit] {message}")


def _abs(p: str) -> str:
    return os.path.abspath(os.path.expanduser(p))


def _collect_build_options(ns: argparse.Namespace) -> dict[str, str]:
    """合并 `build.json` 与命令行参数，命令行优先。"""
    build_type = "release" if ns.release else "debug"
    options: dict[str, str] = {"buildType": build_type}
    if ns.build_config:
        path = require_file(_abs(ns.build_config), "build config")
        _log_step(f"Using build config: {path}")
        options.update(load_build_options(path, build_type))

    overrides = {
        "publisherId": ns.publisher_id,
        "packageCertificateKeyFile": _abs(ns.package_certificate_key_file)
        if ns.package_certificate_key_file
        else "",
        "packageThumbprint": ns.package_thumbprint,
        "defaultLocale": ns.default_locale,
    }
    for key, value in overrides.items():
        if value:
            options[key] = value
    return options


def build_parser() -> argparse.ArgumentParser:
    """构建并返回 `appx-toolkit` 命令行参数解析器。"""
    p = argparse.ArgumentParser(
        prog="appx-toolkit",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Apply config.xml values to the Windows 8 / 8.1 / Phone 8.1 / Windows 10\n"
            "appx manifests of a Windows platform project and write its build configuration."
        ),
    )
    p.add_argument(
        "-r",
        "--root",
        default="",
        help="Windows platform project directory (default: current directory)",
    )
    p.add_argument(
        "-c",
        "--config",
        default="",
        help="Descriptor file (default: <root>/config.xml)",
    )
    p.add_argument(
        "--app-root",
        default="",
        help="Directory image paths in config.xml are relative to (default: <root>/../..)",
    )
    p.add_argument("--build-config", default="", help="build.json with windows.debug/release sections")
    p.add_argument("--release", action="store_true", help="Write the release build configuration")
    p.add_argument("--publisher-id", default="", help="Identity@Publisher override")
    p.add_argument("--package-certificate-key-file", default="", help="Signing certificate (.pfx)")
    p.add_argument("--package-thumbprint", default="", help="Signing certificate thumbprint")
    p.add_argument("--default-locale", default="", help="DefaultLanguage override (default: en-US)")
    p.add_argument("--skip-images", action="store_true", help="Do not copy icons / splash screens")
    p.add_argument(
        "--skip-build-config",
        action="store_true",
        help="Do not write CordovaAppDebug/CordovaAppRelease.projitems",
    )
    p.add_argument("--verbose", action="store_true", help="Verbose logging")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 入口：解析参数、读取描述文件并执行平台准备流程。"""
    parser = build_parser()
    ns = parser.parse_args(argv)

    root = _abs(ns.root) if ns.root else os.getcwd()
    if not os.path.isdir(root):
        raise SystemExit(f"Error: platform directory not found: {root}")
    _log_step(f"Platform root: {root}")

    config_path = require_file(_abs(ns.config) if ns.config else os.path.join(root, "config.xml"), "config")
    _log_step(f"Reading descriptor: {config_path}")
    options = _collect_build_options(ns)
    descriptor = load_descriptor(config_path).with_build_options(options)

    if not ns.skip_build_config:
        path = update_build_config(root, descriptor)
        _log_step(f"Build config ({options['buildType']}): {path}")

    _log_step("Updating appx manifests")
    apply_platform_config(
        root,
        descriptor,
        app_root=_abs(ns.app_root) if ns.app_root else "",
        copy_images=not ns.skip_images,
        verbose=bool(ns.verbose),
    )
    _log_step("Done")
    return 0

