from pathlib import Path

import pytest

from libtargetinfo.targets.host import ProcessHostEnvironment
from libtargetinfo.targets.resolver import resolve_target
from libtargetinfo.targets.target import Target
from libtargetinfo.targets.triplets import BUILTIN_TRIPLETS


class _NoFilesystemHostEnvironment(ProcessHostEnvironment):
    def is_file(self, path: Path) -> bool:
        raise AssertionError(f"Unexpected filesystem access for {path}")


def test_builtin_triplet_x86_64_linux() -> None:
    assert resolve_target("x86_64-unknown-linux-gnu") == Target(
        architecture="x86_64",
        vendor="unknown",
        operating_system="linux",
        environment="gnu",
        endianness="little",
        pointer_width="64",
    )


@pytest.mark.parametrize("triplet", sorted(BUILTIN_TRIPLETS))
def test_builtin_triplets_resolve_without_filesystem(triplet: str) -> None:
    host = _NoFilesystemHostEnvironment(variables={})
    target = resolve_target(triplet, host=host)

    assert (
        target.architecture,
        target.vendor,
        target.operating_system,
        target.environment,
        target.endianness,
        target.pointer_width,
    ) == BUILTIN_TRIPLETS[triplet]
    assert target.architecture
    assert target.operating_system
    assert target.endianness in ("little", "big")


@pytest.mark.parametrize(
    ("expected", "pointer_width", "endianness", "triplets"),
    [
        (
            "x86_64",
            "64",
            "little",
            [
                "x86_64-unknown-linux-gnu",
                "x86_64-unknown-linux-musl",
                "x86_64-unknown-freebsd",
                "x86_64-unknown-dragonfly",
                "x86_64-unknown-bitrig",
                "x86_64-unknown-openbsd",
                "x86_64-unknown-netbsd",
                "x86_64-rumprun-netbsd",
                "x86_64-apple-darwin",
                "x86_64-apple-ios",
                "x86_64-sun-solaris",
                "x86_64-pc-windows-gnu",
                "x86_64-pc-windows-msvc",
            ],
        ),
        (
            "x86",
            "32",
            "little",
            [
                "i586-unknown-linux-gnu",
                "i686-unknown-linux-musl",
                "i686-linux-android",
                "i686-unknown-freebsd",
                "i686-unknown-dragonfly",
                "i686-apple-darwin",
                "i686-pc-windows-gnu",
                "i686-pc-windows-msvc",
                "i586-pc-windows-msvc",
                "i386-apple-ios",
            ],
        ),
        ("mips", "32", "big", ["mips-unknown-linux-musl", "mips-unknown-linux-gnu"]),
        ("mips", "32", "little", ["mipsel-unknown-linux-musl", "mipsel-unknown-linux-gnu"]),
        (
            "aarch64",
            "64",
            "little",
            ["aarch64-unknown-linux-gnu", "aarch64-linux-android", "aarch64-apple-ios"],
        ),
        (
            "arm",
            "32",
            "little",
            [
                "arm-unknown-linux-gnueabi",
                "arm-unknown-linux-gnueabihf",
                "armv7-unknown-linux-gnueabihf",
                "arm-linux-androideabi",
                "armv7-linux-androideabi",
                "armv7-apple-ios",
                "armv7s-apple-ios",
            ],
        ),
        ("powerpc", "32", "big", ["powerpc-unknown-linux-gnu"]),
        ("powerpc64", "64", "big", ["powerpc64-unknown-linux-gnu"]),
        ("powerpc64", "64", "little", ["powerpc64le-unknown-linux-gnu"]),
        ("le32", "32", "little", ["le32-unknown-nacl"]),
        ("asmjs", "32", "little", ["asmjs-unknown-emscripten"]),
    ],
)
def test_builtin_triplets_architecture(
    expected: str,
    pointer_width: str,
    endianness: str,
    triplets: list[str],
) -> None:
    for triplet in triplets:
        target = Target.from_triplet(triplet)
        assert target, triplet
        assert target.architecture == expected
        assert target.pointer_width == pointer_width
        assert target.endianness == endianness


def test_builtin_triplets_vendor() -> None:
    assert {
        triplet for triplet, description in BUILTIN_TRIPLETS.items() if description[1] == "apple"
    } == {
        "x86_64-apple-darwin",
        "x86_64-apple-ios",
        "i686-apple-darwin",
        "i386-apple-ios",
        "aarch64-apple-ios",
        "armv7-apple-ios",
        "armv7s-apple-ios",
    }
    assert {
        triplet for triplet, description in BUILTIN_TRIPLETS.items() if description[1] == "pc"
    } == {
        "x86_64-pc-windows-gnu",
        "x86_64-pc-windows-msvc",
        "i686-pc-windows-gnu",
        "i686-pc-windows-msvc",
        "i586-pc-windows-msvc",
    }
    assert Target.from_triplet("x86_64-rumprun-netbsd").vendor == "rumprun"  # pyright: ignore[reportOptionalMemberAccess]
    assert Target.from_triplet("x86_64-sun-solaris").vendor == "sun"  # pyright: ignore[reportOptionalMemberAccess]
    assert Target.from_triplet("i686-linux-android").vendor == "unknown"  # pyright: ignore[reportOptionalMemberAccess]


def test_builtin_triplets_environment() -> None:
    environments = {description[3] for description in BUILTIN_TRIPLETS.values()}
    assert environments == {"gnu", "musl", "msvc", "newlib", ""}

    assert Target.from_triplet("x86_64-pc-windows-gnu").environment == "gnu"  # pyright: ignore[reportOptionalMemberAccess]
    assert Target.from_triplet("mipsel-unknown-linux-musl").environment == "musl"  # pyright: ignore[reportOptionalMemberAccess]
    assert Target.from_triplet("i586-pc-windows-msvc").environment == "msvc"  # pyright: ignore[reportOptionalMemberAccess]
    assert Target.from_triplet("le32-unknown-nacl").environment == "newlib"  # pyright: ignore[reportOptionalMemberAccess]
    assert Target.from_triplet("armv7-linux-androideabi").environment == ""  # pyright: ignore[reportOptionalMemberAccess]


def test_builtin_triplets_operating_system() -> None:
    assert Target.from_triplet("x86_64-apple-darwin").operating_system == "macos"  # pyright: ignore[reportOptionalMemberAccess]
    assert Target.from_triplet("armv7s-apple-ios").operating_system == "ios"  # pyright: ignore[reportOptionalMemberAccess]
    assert Target.from_triplet("aarch64-linux-android").operating_system == "android"  # pyright: ignore[reportOptionalMemberAccess]
    assert Target.from_triplet("x86_64-rumprun-netbsd").operating_system == "netbsd"  # pyright: ignore[reportOptionalMemberAccess]
    assert Target.from_triplet("asmjs-unknown-emscripten").operating_system == "emscripten"  # pyright: ignore[reportOptionalMemberAccess]


def test_builtin_triplet_is_case_sensitive() -> None:
    assert Target.from_triplet("X86_64-unknown-linux-gnu") is None
    assert Target.from_triplet("x86_64-unknown-linux-gnu ") is None
    assert Target.from_triplet("x86_64-unknown-linux") is None
