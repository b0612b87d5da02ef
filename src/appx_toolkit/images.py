"""
把描述文件声明的图标/启动图复制为 Windows 工程约定的资源文件名。

- 声明了 `target` 的图片按 MRT 规则复制（保留 `.scale-N` 后缀）。
- 否则按宽高匹配平台默认资源，匹配不到的跳过并告警。
"""

from __future__ import annotations

import os
import re
import shutil
from dataclasses import dataclass

from .descriptor import Descriptor
from .pipeline_utils import warn
from .types import ImageResource


@dataclass(frozen=True)
class PlatformImage:
    dest: str
    width: int
    height: int


PLATFORM_IMAGES = (
    PlatformImage("Square150x150Logo.scale-100.png", 150, 150),
    PlatformImage("Square30x30Logo.scale-100.png", 30, 30),
    PlatformImage("StoreLogo.scale-100.png", 50, 50),
    PlatformImage("SplashScreen.scale-100.png", 620, 300),
    # 以下带缩放后缀的条目仅为兼容按尺寸查找。
    PlatformImage("StoreLogo.scale-240.png", 120, 120),
    PlatformImage("Square44x44Logo.scale-100.png", 44, 44),
    PlatformImage("Square44x44Logo.scale-240.png", 106, 106),
    PlatformImage("Square70x70Logo.scale-100.png", 70, 70),
    PlatformImage("Square71x71Logo.scale-100.png", 71, 71),
    PlatformImage("Square71x71Logo.scale-240.png", 170, 170),
    PlatformImage("Square150x150Logo.scale-240.png", 360, 360),
    PlatformImage("Square310x310Logo.scale-100.png", 310, 310),
    PlatformImage("Wide310x150Logo.scale-100.png", 310, 150),
    PlatformImage("Wide310x150Logo.scale-240.png", 744, 360),
    PlatformImage("SplashScreenPhone.scale-240.png", 1152, 1920),
)

DEFAULT_SCALE = ".scale-100"


def find_platform_image(width: int | None, height: int | None) -> PlatformImage | None:
    """按尺寸查找平台资源；只给出一边时只比较该边，都没给出时返回 `None`。"""
    if not width and not height:
        return None
    for res in PLATFORM_IMAGES:
        if (not width or width == res.width) and (not height or height == res.height):
            return res
    return None


def _copy_image(src: str, dest_dir: str, dest_name: str, *, verbose: bool) -> None:
    dest = os.path.join(dest_dir, dest_name)
    if verbose:
        print(f"Copying image: {src} -> {dest}")
    shutil.copyfile(src, dest)


def copy_mrt_image(src: str, target: str, dest_dir: str, *, verbose: bool = False) -> int:
    """
    复制 `logo.png`、`logo.scale-100.png`、`logo.scale-200.png` 等同组图片，
    重命名为 `<target>.scale-N.png`，返回复制数量。
    """
    src_dir = os.path.dirname(src)
    src_stem, src_ext = os.path.splitext(os.path.basename(src))
    dest_stem, dest_ext = os.path.splitext(target)

    pattern = re.compile(rf"^{re.escape(src_stem)}(\.scale-[0-9]+)?{re.escape(src_ext)}$")
    names = os.listdir(src_dir) if os.path.isdir(src_dir) else []
    matches = sorted(name for name in names if pattern.match(name))
    if not matches:
        print(f"No images found for target: {dest_stem}")
        return 0

    for name in matches:
        scale = pattern.match(name).group(1) or DEFAULT_SCALE
        _copy_image(os.path.join(src_dir, name), dest_dir, f"{dest_stem}{scale}{dest_ext}", verbose=verbose)
    return len(matches)


def copy_images(
    descriptor: Descriptor,
    platform_root: str,
    app_root: str,
    *,
    verbose: bool = False,
) -> None:
    """复制全部图标与启动图到 `<platform_root>/images`。"""
    dest_dir = os.path.join(platform_root, "images")
    os.makedirs(dest_dir, exist_ok=True)

    images: list[ImageResource] = [*descriptor.icons, *descriptor.splash_screens]
    for img in images:
        src = os.path.join(app_root, img.src)
        if img.target:
            copy_mrt_image(src, img.target + ".png", dest_dir, verbose=verbose)
            continue
        target_img = find_platform_image(img.width, img.height)
        if target_img is None:
            warn(f"The following image is skipped due to unsupported size: {img.src}")
            continue
        if not os.path.isfile(src):
            warn(f"The following image is skipped because it does not exist: {img.src}")
            continue
        _copy_image(src, dest_dir, target_img.dest, verbose=verbose)
