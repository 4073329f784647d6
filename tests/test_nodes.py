import pytest

from multilaunch.configuration import Configuration
from multilaunch.nodes import ActiveNode, Anchor, LinkedFile
from multilaunch.scene import Scene
from multilaunch.structures import (
    AnchorStyle,
    ContextObject,
    Kind,
    LineStyle,
    Rectangle,
    Symbol,
)


@pytest.fixture
def config():
    return Configuration(
        connection_styles=[
            LineStyle(color="#000001"),
            LineStyle(color="#000002"),
            LineStyle(color="#000003"),
        ],
        linked_file_styles=[Symbol(Rectangle(20, 20)), Symbol(Rectangle(30, 30))],
        anchor=AnchorStyle(symbol=Symbol(Rectangle(30, 30)), icon="/icone/ancre.png"),
    )


@pytest.fixture
def scene():
    return Scene(300, 600)


def make_node(config, scene, x, y):
    node = ActiveNode(config, scene, Kind.SOFTWARE, "prog")
    node.place(x, y)
    scene.add(node)
    return node


def test_set_file_name_splits_path(config, scene):
    linked = LinkedFile(config, scene)
    assert linked.set_file_name("/home/me/work.txt") is True
    assert linked.file_name == "work.txt"
    assert linked.full_path == "/home/me/work.txt"


def test_set_file_name_without_separator(config, scene):
    linked = LinkedFile(config, scene)
    assert linked.set_file_name("work.txt") is False
    assert linked.file_name == ""
    assert linked.full_path == "work.txt"


def test_init_from_context_work(config, scene):
    context = ContextObject(work_file="/data/a.txt", work_x=12.0, work_y=34.0)
    linked = LinkedFile(config, scene)
    assert linked.init_from_context(Kind.WORK_FILE, context) is True
    assert linked.kind == Kind.WORK_FILE
    assert linked.name == "fichier travail"
    assert linked.position == (12.0, 34.0)
    assert linked.dimension == config.linked_file_style(0).dimension


def test_init_from_context_config(config, scene):
    context = ContextObject(config_file="/etc/b.cfg", config_x=5.0, config_y=6.0)
    linked = LinkedFile(config, scene)
    assert linked.init_from_context(Kind.CONFIG_FILE, context) is True
    assert linked.name == "fichier configuration"
    assert linked.icon == "/icone/ficcfg.png"
    assert linked.dimension == config.linked_file_style(1).dimension


def test_init_from_context_unknown_kind(config, scene):
    linked = LinkedFile(config, scene)
    assert linked.init_from_context(Kind.ANCHOR, ContextObject()) is False
    assert linked.name == "fic lie inconnu"


def test_init_new_places_at_third(config, scene):
    linked = LinkedFile(config, scene)
    linked.init_new(Kind.WORK_FILE, "fichier travail", "/icone/fictrv.png")
    assert linked.position == (100, 200)
    assert linked.caption == "fichier travail"


def test_connect_uses_file_style(config, scene):
    node = make_node(config, scene, 50, 50)
    linked = LinkedFile(config, scene)
    linked.init_new(Kind.WORK_FILE, "fichier travail", "/icone/fictrv.png")
    assert node.connect(linked) is True
    connection = node.connections[0]
    assert connection in scene
    assert connection in linked.connections
    assert connection.line == config.connection_style(1)
    assert connection.source is node and connection.target is linked


def test_connect_none(config, scene):
    node = make_node(config, scene, 50, 50)
    assert node.connect(None) is False
    assert node.connections == []


def test_find_connection(config, scene):
    node = make_node(config, scene, 50, 50)
    linked = LinkedFile(config, scene)
    linked.init_new(Kind.CONFIG_FILE, "fichier configuration", "/icone/ficcfg.png")
    node.connect(linked)
    found = node.find_connection(Kind.CONFIG_FILE)
    assert found is node.connections[0]
    assert node.find_connection(Kind.WORK_FILE) is None


def test_remove_connections(config, scene):
    node = make_node(config, scene, 50, 50)
    first = make_node(config, scene, 200, 50)
    second = make_node(config, scene, 50, 400)
    node.connect(first)
    node.connect(second)
    connections = list(node.connections)
    node.remove_connections()
    assert node.connections == []
    assert first.connections == [] and second.connections == []
    assert all(connection not in scene for connection in connections)


def test_anchor_placed_above_boat(config, scene):
    boat = make_node(config, scene, 100, 200)
    anchor = Anchor(boat, config)
    assert anchor.x == boat.x
    assert anchor.y == 160
    assert anchor.connected_object() is boat
    assert anchor.kind == Kind.ANCHOR


def test_anchor_drop_and_transfer_through_scene(config, scene):
    boat = make_node(config, scene, 100, 300)
    target = make_node(config, scene, 250, 300)
    anchor = Anchor(boat, config)
    scene.add(anchor)
    boat.drop_anchor(anchor, boat, config.connection_style(0))
    pending = boat.current_connection
    assert pending.target is anchor and pending.source is boat
    scene.press(anchor.x, anchor.y)
    scene.drag(target.x, target.y)
    scene.release(target.x, target.y)
    assert anchor not in scene
    assert pending.target is target


def test_release_anchor(config, scene):
    boat = make_node(config, scene, 100, 300)
    anchor = Anchor(boat, config)
    boat.drop_anchor(anchor, boat, None)
    assert boat.anchor is anchor
    boat.release_anchor()
    assert boat.anchor is None


def test_remove_connection_only_known(config, scene):
    node = make_node(config, scene, 50, 50)
    other = make_node(config, scene, 200, 200)
    node.connect(other)
    connection = node.connections[0]
    node.remove_connection(connection)
    node.remove_connection(connection)
    assert node.connections == []
    assert other.connections == [connection]