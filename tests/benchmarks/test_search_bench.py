import pytest

from binstring import BinString


@pytest.mark.bench
def test_rfind_throughput(benchmark):
    value = BinString(b"\xff\x00payload " * 4096 + b"needle")
    assert benchmark(lambda: value.rfind(b"needle")) == len(value) - len(b"needle")


@pytest.mark.bench
def test_replace_throughput(benchmark):
    value = BinString(bytes(range(256)) * 256)
    benchmark(lambda: value.replace(0x00, 0x20))
