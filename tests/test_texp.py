from dolkit.texp import (
    RAS,
    TEX,
    ConstExpression,
    TEArg,
    TevExpression,
    TExpType,
    get_type,
    ref,
    unref,
)


def test_get_type_of_none_is_zero():
    assert get_type(None) is TExpType.ZERO


def test_get_type_of_markers():
    assert get_type(TEX) is TExpType.TEX
    assert get_type(RAS) is TExpType.RAS


def test_get_type_of_nodes():
    assert get_type(TevExpression()) is TExpType.TEV
    assert get_type(ConstExpression()) is TExpType.CNST


def test_get_type_values_fixed_by_format():
    assert get_type(None) == 0
    assert get_type(TevExpression()) == 1
    assert get_type(TEX) == 2
    assert get_type(RAS) == 3
    assert get_type(ConstExpression()) == 4


def test_ref_colour_and_alpha():
    tev = TevExpression()
    ref(tev, 1)
    ref(tev, 1)
    ref(tev, 0)
    assert (tev.c_ref, tev.a_ref) == (2, 1)


def test_ref_const():
    cnst = ConstExpression()
    ref(cnst, 0)
    ref(cnst, 1)
    assert cnst.ref == 2


def test_const_ref_wraps_as_byte():
    cnst = ConstExpression(ref=255)
    ref(cnst, 1)
    assert cnst.ref == 0


def test_ref_on_markers_leaves_them_alone():
    ref(TEX, 1)
    ref(RAS, 0)
    ref(None, 1)
    assert get_type(TEX) is TExpType.TEX


def test_unref_const_stops_at_zero():
    cnst = ConstExpression(ref=1)
    unref(cnst, 0)
    unref(cnst, 0)
    assert cnst.ref == 0


def test_unref_and_ref_round_trip():
    tev = TevExpression(c_ref=3, a_ref=2)
    ref(tev, 1)
    unref(tev, 1)
    ref(tev, 0)
    unref(tev, 0)
    assert (tev.c_ref, tev.a_ref) == (3, 2)


def test_unref_releases_inputs_when_unused():
    colour_input = ConstExpression(ref=1)
    alpha_input = ConstExpression(ref=2)
    tev = TevExpression(c_ref=1)
    tev.c_in[0] = TEArg(sel=1, exp=colour_input)
    tev.a_in[2] = TEArg(sel=0, exp=alpha_input)
    unref(tev, 1)
    assert tev.c_ref == 0
    assert colour_input.ref == 0
    assert alpha_input.ref == 1


def test_unref_keeps_inputs_while_alpha_referenced():
    child = ConstExpression(ref=1)
    tev = TevExpression(c_ref=1, a_ref=1)
    tev.c_in[0] = TEArg(sel=1, exp=child)
    unref(tev, 1)
    assert child.ref == 1
    assert tev.a_ref == 1


def test_unref_cascades_through_stages():
    leaf = ConstExpression(ref=1)
    inner = TevExpression(a_ref=1)
    inner.a_in[1] = TEArg(sel=0, exp=leaf)
    outer = TevExpression(c_ref=1)
    outer.c_in[3] = TEArg(sel=0, exp=inner)
    unref(outer, 1)
    assert inner.a_ref == 0
    assert leaf.ref == 0


def test_unref_ignores_markers_in_inputs():
    tev = TevExpression(c_ref=1)
    tev.c_in[0] = TEArg(sel=1, exp=TEX)
    tev.a_in[0] = TEArg(sel=0, exp=RAS)
    unref(tev, 1)
    assert tev.c_ref == 0
    assert tev.c_in[0].exp is TEX