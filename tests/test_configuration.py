import pytest

from multilaunch.configuration import Configuration
from multilaunch.structures import LineStyle, PriorityStyle, SoftwareRecord, Symbol, Rectangle


@pytest.fixture
def config():
    return Configuration(
        name="main",
        software=[
            SoftwareRecord(process_name="gimp", display_name="Gimp", class_number=3),
            SoftwareRecord(process_name="vim", display_name="Vim", class_number=1),
            SoftwareRecord(process_name="emacs", display_name="Emacs", class_number=1),
            SoftwareRecord(process_name="ardour", display_name="Ardour", class_number=2),
        ],
        priorities=[
            PriorityStyle(label="low", priority=5),
            PriorityStyle(label="high", priority=50),
        ],
    )


def test_priority_value_in_range(config):
    assert config.priority_value(1) == 50


def test_priority_value_out_of_range_is_one(config):
    assert config.priority_value(7) == 1


def test_priority_labels(config):
    assert config.priority_labels() == ["low", "high"]


def test_priority_labels_empty():
    assert Configuration().priority_labels() == []


def test_select_by_name(config):
    assert config.select_software_by_name("Emacs") is True
    assert config.current_software.process_name == "emacs"


def test_select_by_name_missing_keeps_current(config):
    config.select_software_by_name("Vim")
    assert config.select_software_by_name("Nothing") is False
    assert config.current_software.display_name == "Vim"


def test_software_of_class(config):
    names = [record.display_name for record in config.software_of_class(1)]
    assert names == ["Vim", "Emacs"]


def test_software_of_unknown_class(config):
    assert config.software_of_class(9) == []


def test_select_software(config):
    assert config.select_software(1, 1) is True
    assert config.current_software.display_name == "Emacs"


def test_select_software_bad_index_clears(config):
    config.select_software(1, 0)
    assert config.select_software(1, 5) is False
    assert config.current_software is None


def test_software_classes_order(config):
    assert config.software_classes() == [3, 1, 2]


def test_software_classes_sorted(config):
    classes = config.software_classes(sort=True)
    assert classes == sorted(set(classes))
    assert set(classes) == {1, 2, 3}


def test_connection_style_lookup():
    styles = [LineStyle(color="#000001"), LineStyle(color="#000002"), LineStyle(color="#000003")]
    config = Configuration(connection_styles=styles)
    assert config.connection_style(2) is styles[2]


def test_linked_file_style_lookup():
    symbol = Symbol(dimension=Rectangle(10, 20))
    config = Configuration(linked_file_styles=[Symbol(), symbol])
    assert config.linked_file_style(1) == symbol


def test_connection_style_out_of_range():
    with pytest.raises(IndexError):
        Configuration().connection_style(3)