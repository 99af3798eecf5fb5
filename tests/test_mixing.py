import xxhash

from sample_hash import MIX_SEED, mix


def test_width_and_determinism():
    a = mix([b"hello"])
    assert len(a) == 16
    assert a == mix([b"hello"])


def test_chunking_does_not_matter():
    whole = mix([b"hello world"])
    assert mix([b"hello", b" ", b"world"]) == whole
    assert mix([b"hel", b"", b"lo world"]) == whole


def test_empty_input_uses_fixed_seed():
    assert mix([]) == xxhash.xxh3_128(b"", seed=MIX_SEED).digest()
    assert mix([b""]) == mix([])


def test_seed_is_not_default():
    assert mix([b"x"]) != xxhash.xxh3_128(b"x").digest()


def test_distinct_inputs_differ():
    seen = {mix([bytes([i])]) for i in range(256)}
    assert len(seen) == 256
