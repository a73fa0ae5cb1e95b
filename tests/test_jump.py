from xoshiro_project.generator.xoshiro256 import JUMP, LONG_JUMP, Xoshiro256


def xor_state(a, b):
    return tuple(x ^ y for x, y in zip(a, b))


def test_jump_changes_state_and_stays_nonzero(seeded):
    rng = seeded()
    start = rng.state
    rng.jump()
    once = rng.state
    rng.jump()
    twice = rng.state
    assert once != start
    assert twice != once
    assert twice != start
    assert any(once) and any(twice)


def test_long_jump_differs_from_jump(seeded):
    a = seeded()
    b = seeded()
    a.jump()
    b.long_jump()
    assert a.state != b.state
    assert any(b.state)


def test_jump_is_linear_over_gf2():
    a = Xoshiro256(0x0123456789abcdef, 0xfedcba9876543210, 0x0f0f0f0f0f0f0f0f, 0x1)
    b = Xoshiro256(0xdeadbeefcafebabe, 0x1111111111111111, 0x2, 0xffffffff00000000)
    combined = Xoshiro256(*xor_state(a.state, b.state))
    for gen in (a, b, combined):
        gen.jump()
    assert combined.state == xor_state(a.state, b.state)


def test_jump_commutes_with_next(seeded):
    a = seeded(31337)
    b = seeded(31337)
    a.next_raw()
    a.jump()
    b.jump()
    b.next_raw()
    assert a.state == b.state


def test_long_jump_commutes_with_next(seeded):
    a = seeded(4)
    b = seeded(4)
    for _ in range(3):
        a.next_raw()
    a.long_jump()
    b.long_jump()
    for _ in range(3):
        b.next_raw()
    assert a.state == b.state


def test_jump_same_for_both_variants(seeded):
    ss = seeded(8, "starstar")
    plus = seeded(8, "plus")
    ss.jump()
    plus.jump()
    assert ss.state == plus.state


def test_jump_returns_none(seeded):
    rng = seeded()
    assert rng.jump() is None
    assert rng.long_jump() is None


def test_jump_tables():
    assert len(JUMP) == 4 and len(LONG_JUMP) == 4
    assert JUMP[0] == 0x180ec6d33cfd0aba
    assert LONG_JUMP[3] == 0x39109bb02acbe635


def test_spawn_gives_jumped_streams(seeded):
    master = seeded(10)
    reference = seeded(10)
    children = master.spawn(3)
    assert len(children) == 3
    for child in children:
        assert child.state == reference.state
        reference.jump()
    assert master.state == reference.state
    assert len({c.state for c in children}) == 3


def test_spawn_long(seeded):
    master = seeded(10)
    reference = seeded(10)
    children = master.spawn(2, long=True)
    reference.long_jump()
    assert children[1].state == reference.state


def test_spawned_streams_do_not_share_outputs(seeded):
    children = seeded(1).spawn(2)
    first = {children[0]() for _ in range(2000)}
    second = {children[1]() for _ in range(2000)}
    assert not first & second


def test_jump_reference_state(rng):
    rng.jump()
    assert rng.state == (
        0x8c7a153956b5f3d1,
        0x701f1a713401d85e,
        0x6527f66a65469085,
        0x8386b786c4408050,
    )
    assert rng.next_raw() == 0xbbd2f312298443d8


def test_long_jump_reference_state(rng):
    rng.long_jump()
    assert rng.state == (
        0x096a8eb71295a400,
        0xdbf84991e50f4516,
        0x534ee745810d2a0e,
        0x31655ca1a2215bf1,
    )
