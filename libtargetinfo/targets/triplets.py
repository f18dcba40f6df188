"""Built-in compilation targets known without any target specification file.

Each row describes one or more triplets sharing the same description.
Adding new target must be done only by adding (or extending) row here.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping

    from libtargetinfo.targets.target import Endianness

TripletDescription: TypeAlias = "tuple[str, str, str, str, Endianness, str]"

# fmt: off
_BUILTIN_TRIPLET_ROWS: Final[tuple[tuple[tuple[str, ...], TripletDescription], ...]] = (
    # (triplets...),                     (architecture, vendor, os, environment, endianness, pointer width)
    # Linux (GNU)
    (("x86_64-unknown-linux-gnu",),      ("x86_64", "unknown", "linux", "gnu", "little", "64")),
    (("i686-unknown-linux-gnu",
      "i586-unknown-linux-gnu"),         ("x86", "unknown", "linux", "gnu", "little", "32")),
    (("mips-unknown-linux-gnu",),        ("mips", "unknown", "linux", "gnu", "big", "32")),
    (("mipsel-unknown-linux-gnu",),      ("mips", "unknown", "linux", "gnu", "little", "32")),
    (("powerpc-unknown-linux-gnu",),     ("powerpc", "unknown", "linux", "gnu", "big", "32")),
    (("powerpc64-unknown-linux-gnu",),   ("powerpc64", "unknown", "linux", "gnu", "big", "64")),
    (("powerpc64le-unknown-linux-gnu",), ("powerpc64", "unknown", "linux", "gnu", "little", "64")),
    (("arm-unknown-linux-gnueabi",
      "arm-unknown-linux-gnueabihf",
      "armv7-unknown-linux-gnueabihf"),  ("arm", "unknown", "linux", "gnu", "little", "32")),
    (("aarch64-unknown-linux-gnu",),     ("aarch64", "unknown", "linux", "gnu", "little", "64")),
    # Linux (musl)
    (("x86_64-unknown-linux-musl",),     ("x86_64", "unknown", "linux", "musl", "little", "64")),
    (("i686-unknown-linux-musl",),       ("x86", "unknown", "linux", "musl", "little", "32")),
    (("mips-unknown-linux-musl",),       ("mips", "unknown", "linux", "musl", "big", "32")),
    (("mipsel-unknown-linux-musl",),     ("mips", "unknown", "linux", "musl", "little", "32")),
    # Android
    (("i686-linux-android",),            ("x86", "unknown", "android", "", "little", "32")),
    (("arm-linux-androideabi",
      "armv7-linux-androideabi"),        ("arm", "unknown", "android", "", "little", "32")),
    (("aarch64-linux-android",),         ("aarch64", "unknown", "android", "", "little", "64")),
    # BSD family
    (("i686-unknown-freebsd",),          ("x86", "unknown", "freebsd", "", "little", "32")),
    (("x86_64-unknown-freebsd",),        ("x86_64", "unknown", "freebsd", "", "little", "64")),
    (("i686-unknown-dragonfly",),        ("x86", "unknown", "dragonfly", "", "little", "32")),
    (("x86_64-unknown-dragonfly",),      ("x86_64", "unknown", "dragonfly", "", "little", "64")),
    (("x86_64-unknown-bitrig",),         ("x86_64", "unknown", "bitrig", "", "little", "64")),
    (("x86_64-unknown-openbsd",),        ("x86_64", "unknown", "openbsd", "", "little", "64")),
    (("x86_64-unknown-netbsd",),         ("x86_64", "unknown", "netbsd", "", "little", "64")),
    (("x86_64-rumprun-netbsd",),         ("x86_64", "rumprun", "netbsd", "", "little", "64")),
    # Apple
    (("x86_64-apple-darwin",),           ("x86_64", "apple", "macos", "", "little", "64")),
    (("i686-apple-darwin",),             ("x86", "apple", "macos", "", "little", "32")),
    (("i386-apple-ios",),                ("x86", "apple", "ios", "", "little", "32")),
    (("x86_64-apple-ios",),              ("x86_64", "apple", "ios", "", "little", "64")),
    (("aarch64-apple-ios",),             ("aarch64", "apple", "ios", "", "little", "64")),
    (("armv7-apple-ios",
      "armv7s-apple-ios"),               ("arm", "apple", "ios", "", "little", "32")),
    # Solaris
    (("x86_64-sun-solaris",),            ("x86_64", "sun", "solaris", "", "little", "64")),
    # Windows
    (("x86_64-pc-windows-gnu",),         ("x86_64", "pc", "windows", "gnu", "little", "64")),
    (("i686-pc-windows-gnu",),           ("x86", "pc", "windows", "gnu", "little", "32")),
    (("x86_64-pc-windows-msvc",),        ("x86_64", "pc", "windows", "msvc", "little", "64")),
    (("i586-pc-windows-msvc",
      "i686-pc-windows-msvc"),           ("x86", "pc", "windows", "msvc", "little", "32")),
    # Web / sandboxed
    (("le32-unknown-nacl",),             ("le32", "unknown", "nacl", "newlib", "little", "32")),
    (("asmjs-unknown-emscripten",),      ("asmjs", "unknown", "emscripten", "", "little", "32")),
)
# fmt: on

BUILTIN_TRIPLETS: Final[Mapping[str, TripletDescription]] = MappingProxyType(
    {
        triplet: description
        for triplets, description in _BUILTIN_TRIPLET_ROWS
        for triplet in triplets
    },
)
