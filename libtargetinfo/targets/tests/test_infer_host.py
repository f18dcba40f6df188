from libtargetinfo.targets.infer_host import infer_host_target, infer_host_triplet


def test_infer_host_triplet() -> None:
    assert infer_host_triplet("Linux", "x86_64") == "x86_64-unknown-linux-gnu"
    assert infer_host_triplet("Linux", "aarch64") == "aarch64-unknown-linux-gnu"
    assert infer_host_triplet("Darwin", "x86_64") == "x86_64-apple-darwin"
    assert infer_host_triplet("Windows", "AMD64") == "x86_64-pc-windows-msvc"
    assert infer_host_triplet("FreeBSD", "amd64") == "x86_64-unknown-freebsd"


def test_infer_host_triplet_unknown() -> None:
    # No built-in description for these
    assert infer_host_triplet("Darwin", "arm64") is None
    assert infer_host_triplet("Linux", "riscv64") is None
    assert infer_host_triplet("Haiku", "x86_64") is None


def test_infer_host_target_is_builtin() -> None:
    triplet = infer_host_triplet()
    target = infer_host_target()
    if triplet is None:
        assert target is None
    else:
        assert target
        assert target.architecture
