from platform import machine, system

from libtargetinfo.targets.target import Target

# Normalized `platform.machine()` values into triplet architecture
_HOST_ARCHITECTURES = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "i386": "i686",
    "i686": "i686",
    "x86": "i686",
    "arm64": "aarch64",
    "aarch64": "aarch64",
}


def infer_host_triplet(
    host_system: str | None = None,
    host_machine: str | None = None,
) -> str | None:
    """Try to infer built-in triplet from current (or given) system."""
    host_system = system() if host_system is None else host_system
    host_machine = machine() if host_machine is None else host_machine

    architecture = _HOST_ARCHITECTURES.get(host_machine.lower())
    if architecture is None:
        return None

    match host_system:
        case "Darwin":
            triplet = f"{architecture}-apple-darwin"
        case "Linux":
            triplet = f"{architecture}-unknown-linux-gnu"
        case "Windows":
            triplet = f"{architecture}-pc-windows-msvc"
        case "FreeBSD":
            triplet = f"{architecture}-unknown-freebsd"
        case _:
            return None

    if Target.from_triplet(triplet) is None:
        # e.g `aarch64-apple-darwin` is not a built-in one
        return None
    return triplet


def infer_host_target() -> Target | None:
    """Try to infer target from current system."""
    triplet = infer_host_triplet()
    if triplet is None:
        return None
    return Target.from_triplet(triplet)
