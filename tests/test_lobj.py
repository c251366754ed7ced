from dolkit.lobj import (
    ALPHA,
    DIFFUSE,
    HIDDEN,
    SPECULAR,
    LightType,
    LObj,
)


def test_set_flags_adds_bits():
    lobj = LObj(flags=DIFFUSE)
    lobj.set_flags(SPECULAR)
    assert lobj.flags == DIFFUSE | SPECULAR


def test_set_flags_keeps_sixteen_bits():
    lobj = LObj()
    lobj.set_flags(0x10000 | HIDDEN)
    assert lobj.flags == HIDDEN


def test_clear_flags_removes_only_given_bits():
    lobj = LObj(flags=DIFFUSE | ALPHA | HIDDEN)
    lobj.clear_flags(ALPHA)
    assert lobj.flags == DIFFUSE | HIDDEN


def test_set_then_clear_round_trip():
    lobj = LObj(flags=DIFFUSE)
    lobj.set_flags(HIDDEN)
    lobj.clear_flags(HIDDEN)
    assert lobj.flags == DIFFUSE


def test_light_type_from_low_bits():
    lobj = LObj(flags=LightType.SPOT | DIFFUSE)
    assert lobj.light_type() is LightType.SPOT


def test_light_type_default_is_ambient():
    assert LObj().light_type() is LightType.AMBIENT


def test_light_type_point_values():
    assert LightType.POINT == 2
    assert LObj(flags=LightType.POINT | SPECULAR).light_type() is LightType.POINT