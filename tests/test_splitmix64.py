from xoshiro_project.generator.splitmix64 import MASK64, SplitMix64


def test_reference_sequence_seed_1234567():
    sm = SplitMix64(1234567)
    expected = [
        6457827717110365317,
        3203168211198807973,
        9817491932198370423,
        4593380528125082431,
        16408922859458223821,
    ]
    assert [sm() for _ in range(5)] == expected


def test_reference_first_output_seed_zero():
    sm = SplitMix64(0)
    assert sm.next_raw() == 0xe220a8397b1dcdaf
    assert sm.next_raw() == 0x6e789e6aa1b965f4


def test_same_seed_same_sequence():
    a = SplitMix64(987654321)
    b = SplitMix64(987654321)
    assert [a() for _ in range(1000)] == [b() for _ in range(1000)]


def test_zero_seed_is_not_degenerate():
    sm = SplitMix64(0)
    outs = [sm() for _ in range(1000)]
    assert outs[0] != 0
    assert len(set(outs)) == 1000


def test_seed_is_masked_to_64_bits():
    a = SplitMix64((1 << 64) + 5)
    b = SplitMix64(5)
    assert a() == b()


def test_outputs_fit_in_64_bits():
    sm = SplitMix64(MASK64)
    for _ in range(100):
        v = sm()
        assert sm.min() <= v <= sm.max()


def test_peek_does_not_consume():
    sm = SplitMix64(42)
    peeked = sm.peek_next()
    assert sm.peek_next() == peeked
    assert sm() == peeked
