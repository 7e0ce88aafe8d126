import re
from unittest.mock import patch

from dbom.ids import generate_uuid_v4

UUID_V4 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


def test_format_is_uuid_v4():
    values = [generate_uuid_v4() for _ in range(100)]
    matching = [value for value in values if UUID_V4.fullmatch(value)]
    assert matching == values
    assert {len(value) for value in values} == {36}
    assert {value[14] for value in values} == {"4"}


def test_ids_are_unique():
    ids = {generate_uuid_v4() for _ in range(200)}
    assert len(ids) == 200


@patch("dbom.ids.secrets.randbits", side_effect=[0x12345678, 0x9ABCDEF0, 0xFEDCBA98, 0x76543210])
def test_layout_of_random_words(_randbits):
    assert generate_uuid_v4() == "12345678-9abc-4ef0-bedc-ba9876543210"


@patch("dbom.ids.secrets.randbits", return_value=0)
def test_version_and_variant_bits_forced(_randbits):
    assert generate_uuid_v4() == "00000000-0000-4000-8000-000000000000"