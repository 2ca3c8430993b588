import pytest

from utils.validators import has_attributes, is_positive_int


@pytest.mark.parametrize("value,expected", [
    (1, True),
    (25, True),
    (0, False),
    (-3, False),
    (1.0, False),
    ("1", False),
    (None, False),
    (True, False),
])
def test_is_positive_int(value, expected):
    assert is_positive_int(value) is expected


def test_has_attributes():
    class Request:
        ticket_type = "ADULT"
        quantity = 1

    assert has_attributes(Request(), "ticket_type", "quantity")
    assert not has_attributes(object(), "ticket_type")
    assert not has_attributes(None, "ticket_type")
