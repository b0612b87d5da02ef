from appx_toolkit.descriptor import Descriptor
from appx_toolkit.images import copy_images, copy_mrt_image, find_platform_image
from appx_toolkit.types import ImageResource


def test_find_platform_image_matches_given_dimensions() -> None:
    assert find_platform_image(150, 150).dest == "Square150x150Logo.scale-100.png"
    assert find_platform_image(620, None).dest == "SplashScreen.scale-100.png"
    assert find_platform_image(None, 1920).dest == "SplashScreenPhone.scale-240.png"
    assert find_platform_image(None, None) is None
    assert find_platform_image(123, 456) is None


def test_copy_mrt_image_keeps_scale_suffix(tmp_path) -> None:
    src_dir = tmp_path / "res"
    src_dir.mkdir()
    for name in ("logo.png", "logo.scale-200.png", "logo.scale-400.png", "logo-other.png"):
        (src_dir / name).write_bytes(name.encode())
    dest = tmp_path / "images"
    dest.mkdir()

    count = copy_mrt_image(str(src_dir / "logo.png"), "Square44x44Logo.png", str(dest))

    assert count == 3
    assert sorted(p.name for p in dest.iterdir()) == [
        "Square44x44Logo.scale-100.png",
        "Square44x44Logo.scale-200.png",
        "Square44x44Logo.scale-400.png",
    ]
    assert (dest / "Square44x44Logo.scale-100.png").read_bytes() == b"logo.png"


def test_copy_mrt_image_without_matches_reports(tmp_path, capsys) -> None:
    (tmp_path / "other.png").write_bytes(b"x")
    count = copy_mrt_image(str(tmp_path / "missing.png"), "StoreLogo.png", str(tmp_path))
    assert count == 0
    assert "No images found for target: StoreLogo" in capsys.readouterr().out


def test_copy_images_by_size_and_target(tmp_path, capsys) -> None:
    app_root = tmp_path / "app"
    (app_root / "res").mkdir(parents=True)
    for name in ("icon.png", "splash.png", "odd.png", "wide.png", "wide.scale-240.png"):
        (app_root / "res" / name).write_bytes(name.encode())
    platform_root = tmp_path / "platforms" / "windows"
    platform_root.mkdir(parents=True)

    descriptor = Descriptor(
        icons=(
            ImageResource(src="res/icon.png", width=150, height=150),
            ImageResource(src="res/odd.png", width=99, height=99),
            ImageResource(src="res/wide.png", target="Wide310x150Logo"),
        ),
        splash_screens=(ImageResource(src="res/splash.png", width=620, height=300),),
    )

    copy_images(descriptor, str(platform_root), str(app_root))

    images = platform_root / "images"
    assert sorted(p.name for p in images.iterdir()) == [
        "SplashScreen.scale-100.png",
        "Square150x150Logo.scale-100.png",
        "Wide310x150Logo.scale-100.png",
        "Wide310x150Logo.scale-240.png",
    ]
    assert (images / "Square150x150Logo.scale-100.png").read_bytes() == b"icon.png"
    err = capsys.readouterr().err
    assert "unsupported size: res/odd.png" in err


def test_copy_images_skips_missing_source_and_continues(tmp_path, capsys) -> None:
    app_root = tmp_path / "app"
    (app_root / "res").mkdir(parents=True)
    (app_root / "res" / "other.png").write_bytes(b"store")
    platform_root = tmp_path / "platforms" / "windows"
    platform_root.mkdir(parents=True)

    descriptor = Descriptor(
        icons=(
            ImageResource(src="res/missing.png", width=150, height=150),
            ImageResource(src="nowhere/logo.png", target="Square44x44Logo"),
            ImageResource(src="res/other.png", width=50, height=50),
        ),
    )

    copy_images(descriptor, str(platform_root), str(app_root))

    images = platform_root / "images"
    assert [p.name for p in images.iterdir()] == ["StoreLogo.scale-100.png"]
    captured = capsys.readouterr()
    assert "does not exist: res/missing.png" in captured.err
    assert "No images found for target: Square44x44Logo" in captured.out
