from multilaunch.element import Element, Surface
from multilaunch.structures import Colors, Font, Kind, Rectangle, SurfaceStyle, Symbol


def _symbol(width=60, height=30, font_height=5):
    return Symbol(
        dimension=Rectangle(width, height),
        surface=SurfaceStyle(colors=Colors("#112233", "#445566"), font=Font(font_height, "#000000", "Sans")),
    )


def test_default_element_kind_and_name():
    element = Element()
    assert element.kind == Kind.ELEMENT
    assert element.name == "élément"
    assert not element.is_software()


def test_software_kind():
    assert Element(Kind.SOFTWARE).is_software()


def test_place_sets_bounds_around_centre():
    element = Element()
    element.place(100, 200)
    left, right, top, bottom = element.bounds
    assert (left + right) / 2 == 100
    assert (top + bottom) / 2 == 200
    assert right - left == element.width
    assert bottom - top == element.height


def test_odd_width_uses_integer_half():
    element = Surface()
    element.apply_symbol(_symbol(width=41, height=41))
    element.place(100, 100)
    assert element.left == 100 - 41 // 2
    assert element.right - element.left == 41


def test_contains_is_strict():
    element = Element()
    element.place(50, 50)
    assert element.contains(50, 50)
    assert not element.contains(element.left, 50)
    assert not element.contains(50, element.bottom)


def test_shift_and_move_agree():
    a = Element()
    b = Element()
    a.place(10, 10)
    b.place(10, 10)
    a.shift(5, -3)
    b.move(5, -3)
    assert a.position == b.position
    assert a.bounds == b.bounds


def test_contact_points():
    element = Element()
    element.place(100, 100)
    assert element.contact_point(0) == (100, 100 + element.height // 2)
    assert element.contact_point(1) == (100 + element.width // 2, 100)
    assert element.contact_point(3) == (100 - element.width // 2, 100)
    assert element.contact_point(100) == (100, 100)


def test_top_contact_point_uses_banner():
    surface = Surface()
    surface.apply_symbol(_symbol(font_height=5))
    surface.place(0, 0)
    assert surface.contact_point(2) == (0, -surface.height + surface.banner_height / 2)


def test_extend_bounds_covers_element():
    element = Element()
    element.place(0, 0)
    start = (10.0, 20.0, 10.0, 20.0)
    xmin, xmax, ymin, ymax = element.extend_bounds(start)
    assert xmin == element.left and ymin == element.top
    assert xmax == 20.0 and ymax == 20.0


def test_clear_banner():
    surface = Surface()
    surface.apply_symbol(_symbol(font_height=7))
    surface.clear_banner()
    assert surface.banner_height == 0


def test_apply_symbol_sets_banner_to_twice_font():
    surface = Surface()
    surface.apply_symbol(_symbol(font_height=7))
    assert surface.banner_height == 2 * 7
    assert surface.background_color == "#445566"
    assert surface.banner_color == "#112233"


def test_symbol_round_trip():
    symbol = _symbol()
    surface = Surface()
    surface.apply_symbol(symbol)
    assert surface.to_symbol() == symbol
    assert surface.equals_symbol(symbol)
    assert surface.same_dimensions(symbol.dimension)


def test_equals_symbol_detects_difference():
    surface = Surface()
    surface.apply_symbol(_symbol())
    assert not surface.equals_symbol(_symbol(width=61))
    assert not surface.equals_symbol(_symbol(font_height=9))


def test_plain_surface_has_no_connected_object():
    surface = Surface()
    surface.transfer_anchor_connection(Surface())
    assert surface.connected_object() is None
    assert surface.title == "nom clair"
    assert surface.caption == "nom processus"